from zentao_mcp.cli import main

main()
