"""ZenAgent node tools (m=zanode): virtual nodes, images, snapshots and ZTF scripts."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import QUERY, ToolSpec, legacy, number, string


def _zanode(function):
    return legacy("zanode", function)


def _lifecycle(verb, description):
    """A GET ``m=zanode&f=<verb>&nodeID=`` call that changes a node's power state."""
    return ToolSpec(
        name=f"{verb}_zanode",
        description=description,
        path=_zanode(verb),
        action=f"{verb} node",
        params=(number("nodeID", "Node ID", required=True),),
    )


def _paging():
    return (
        number("recTotal", "Total records"),
        number("recPerPage", "Records per page"),
        number("pageID", "Page ID for pagination"),
    )


NODE_TOOLS = (
    ToolSpec(
        name="get_zanode_instructions",
        description="Get instructions for ZenTao Node management",
        path=_zanode("instruction"),
    ),
    ToolSpec(
        name="browse_zanodes",
        description="Browse ZenTao nodes with filtering and pagination",
        path=_zanode("browse"),
        action="browse nodes",
        params=(
            string("browseType", "Browse type filter"),
            string("param", "Additional filter parameter"),
            string("orderBy", "Sort order"),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="get_zanode_list",
        description="Get list of nodes for a specific host",
        path=_zanode("nodeList"),
        action="get node list",
        params=(number("hostID", "Host ID", required=True), string("orderBy", "Sort order")),
    ),
    ToolSpec(
        name="create_zanode",
        description="Create a new ZenTao node",
        method="POST",
        path=_zanode("create"),
        action="create node",
        params=(
            number("hostID", "Host ID", required=True, into=QUERY),
            string("node_data", "Node configuration data as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="edit_zanode",
        description="Edit an existing ZenTao node",
        method="POST",
        path=_zanode("edit"),
        action="edit node",
        params=(
            number("id", "Node ID", required=True, into=QUERY),
            string("node_data", "Updated node configuration data as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="view_zanode",
        description="View details of a specific ZenTao node",
        path=_zanode("view"),
        action="view node",
        params=(number("id", "Node ID", required=True),),
    ),
    _lifecycle("start", "Start a ZenTao node"),
    _lifecycle("close", "Close a ZenTao node"),
    _lifecycle("suspend", "Suspend a ZenTao node"),
    _lifecycle("reboot", "Reboot a ZenTao node"),
    _lifecycle("resume", "Resume a suspended ZenTao node"),
    _lifecycle("destroy", "Destroy a ZenTao node"),
    ToolSpec(
        name="get_zanode_vnc",
        description="Get VNC access information for a ZenTao node",
        path=_zanode("getVNC"),
        action="get VNC info",
        params=(number("nodeID", "Node ID", required=True),),
    ),
    ToolSpec(
        name="get_zanodes",
        description="Get all available nodes",
        path=_zanode("ajaxGetNodes"),
        action="get nodes",
    ),
)

IMAGE_TOOLS = (
    ToolSpec(
        name="create_zanode_image",
        description="Create an image from a ZenTao node",
        method="POST",
        path=_zanode("createImage"),
        action="create image",
        params=(
            number("nodeID", "Node ID", required=True, into=QUERY),
            string("image_data", "Image configuration data as JSON string"),
        ),
    ),
    ToolSpec(
        name="get_zanode_images",
        description="Get available images for a host",
        path=_zanode("ajaxGetImages"),
        action="get images",
        params=(number("hostID", "Host ID", required=True),),
    ),
    ToolSpec(
        name="get_zanode_image",
        description="Get details of a specific image",
        path=_zanode("ajaxGetImage"),
        action="get image",
        params=(number("imageID", "Image ID", required=True),),
    ),
    ToolSpec(
        name="update_zanode_image",
        description="Update an image configuration",
        method="POST",
        path=_zanode("ajaxUpdateImage"),
        action="update image",
        params=(
            number("imageID", "Image ID", required=True, into=QUERY),
            string("image_data", "Updated image configuration data as JSON string", required=True),
        ),
    ),
)

SNAPSHOT_TOOLS = (
    ToolSpec(
        name="create_zanode_snapshot",
        description="Create a snapshot of a ZenTao node",
        method="POST",
        path=_zanode("createSnapshot"),
        action="create snapshot",
        params=(
            number("nodeID", "Node ID", required=True, into=QUERY),
            string("snapshot_data", "Snapshot configuration data as JSON string"),
        ),
    ),
    ToolSpec(
        name="edit_zanode_snapshot",
        description="Edit a snapshot configuration",
        method="POST",
        path=_zanode("editSnapshot"),
        action="edit snapshot",
        params=(
            number("snapshotID", "Snapshot ID", required=True, into=QUERY),
            string(
                "snapshot_data",
                "Updated snapshot configuration data as JSON string",
                required=True,
            ),
        ),
    ),
    ToolSpec(
        name="delete_zanode_snapshot",
        description="Delete a snapshot",
        path=_zanode("deleteSnapshot"),
        action="delete snapshot",
        params=(number("snapshotID", "Snapshot ID", required=True),),
    ),
    ToolSpec(
        name="browse_zanode_snapshots",
        description="Browse snapshots for a node with pagination",
        path=_zanode("browseSnapshot"),
        action="browse snapshots",
        params=(
            number("nodeID", "Node ID", required=True),
            string("browseType", "Browse type filter"),
            string("orderBy", "Sort order"),
            *_paging(),
        ),
    ),
    ToolSpec(
        name="restore_zanode_snapshot",
        description="Restore a node from a snapshot",
        path=_zanode("restoreSnapshot"),
        action="restore snapshot",
        params=(
            number("nodeID", "Node ID", required=True),
            number("snapshotID", "Snapshot ID", required=True),
        ),
    ),
)

SERVICE_TOOLS = (
    ToolSpec(
        name="get_zanode_task_status",
        description="Get task status for a node",
        path=_zanode("ajaxGetTaskStatus"),
        action="get task status",
        params=(
            number("nodeID", "Node ID", required=True),
            number("taskID", "Task ID"),
            string("type", "Task type"),
            string("status", "Task status filter"),
        ),
    ),
    ToolSpec(
        name="get_zanode_service_status",
        description="Get service status for a host",
        path=_zanode("ajaxGetServiceStatus"),
        action="get service status",
        params=(number("hostID", "Host ID", required=True),),
    ),
    ToolSpec(
        name="install_zanode_service",
        description="Install a service on a node",
        path=_zanode("ajaxInstallService"),
        action="install service",
        params=(
            number("nodeID", "Node ID", required=True),
            string("service", "Service name", required=True),
        ),
    ),
    ToolSpec(
        name="get_zanode_ztf_script",
        description="Get ZTF script for a node",
        path=_zanode("ajaxGetZTFScript"),
        action="get ZTF script",
        params=(
            string("type", "Script type", required=True),
            number("objectID", "Object ID", required=True),
        ),
    ),
    ToolSpec(
        name="run_zanode_ztf_script",
        description="Run a ZTF script",
        method="POST",
        path=_zanode("ajaxRunZTFScript"),
        action="run ZTF script",
        params=(
            number("scriptID", "Script ID", required=True, into=QUERY),
            string("script_data", "Script execution data as JSON string"),
        ),
    ),
)


def register(registry):
    registry.add_all(NODE_TOOLS)
    registry.add_all(IMAGE_TOOLS)
    registry.add_all(SNAPSHOT_TOOLS)
    registry.add_all(SERVICE_TOOLS)
