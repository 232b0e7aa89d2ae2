from zentao_mcp.mcp_server import main

main()
