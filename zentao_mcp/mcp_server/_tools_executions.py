"""Execution (sprint/iteration) views and team management."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, array, legacy, number, string

TOOLS = (
    ToolSpec(
        name="browse_execution",
        description="Browse execution details",
        path=legacy("execution", "browse"),
        params=(number("executionID", "Execution ID", required=True),),
    ),
    ToolSpec(
        name="get_execution_tasks",
        description="Get tasks for an execution",
        path=legacy("execution", "task"),
        params=(
            number("executionID", "Execution ID", required=True),
            string("status", "Task status"),
            string("param", "Parameter"),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
            string("from", "Source"),
            string("blockID", "Block ID"),
        ),
    ),
    ToolSpec(
        name="get_execution_stories",
        description="Get stories for an execution",
        path=legacy("execution", "story"),
        params=(
            number("executionID", "Execution ID", required=True),
            string("storyType", "Story type", enum=("story", "requirement")),
            string("orderBy", "Order by field"),
            string(
                "type",
                "View type",
                enum=("all", "byModule", "byProduct", "byBranch", "bySearch"),
            ),
            number("param", "Parameter value"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
            string("from", "Source"),
            string("blockID", "Block ID"),
        ),
    ),
    ToolSpec(
        name="get_execution_bugs",
        description="Get bugs for an execution",
        path=legacy("execution", "bug"),
        params=(
            number("executionID", "Execution ID", required=True),
            number("productID", "Product ID", required=True),
            string("branch", "Branch"),
            string("orderBy", "Order by field"),
            string("build", "Build"),
            string("type", "Bug type"),
            number("param", "Parameter value"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
    ToolSpec(
        name="get_execution_builds",
        description="Get builds for an execution",
        path=legacy("execution", "build"),
        params=(
            number("executionID", "Execution ID", required=True),
            string("type", "Build type", enum=("all", "product", "bysearch")),
            number("param", "Parameter value"),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
    ToolSpec(
        name="get_execution_burn_chart",
        description="Get burn-down chart for an execution",
        path=legacy("execution", "burn"),
        params=(
            number("executionID", "Execution ID", required=True),
            string("type", "Chart type", enum=("noweekend", "withweekend")),
            string("interval", "Interval"),
            string("burnBy", "Burn by", enum=("left", "estimate", "storyPoint")),
        ),
    ),
    ToolSpec(
        name="get_execution_cfd",
        description="Get Cumulative Flow Diagram for an execution",
        method="POST",
        path=legacy("execution", "cfd"),
        into=QUERY,
        action="get execution CFD",
        params=(
            number("executionID", "Execution ID", required=True),
            string("type", "CFD type", enum=("story", "bug", "task")),
            string("withWeekend", "Include weekends"),
            string("begin", "Begin date"),
            string("end", "End date"),
        ),
    ),
    ToolSpec(
        name="get_execution_kanban",
        description="Get kanban view for an execution",
        path=legacy("execution", "kanban"),
        params=(
            number("executionID", "Execution ID", required=True),
            string("browseType", "Browse type", enum=("all", "story", "bug", "task")),
            string("orderBy", "Order by field"),
            string(
                "groupBy",
                "Group by field",
                enum=(
                    "default",
                    "pri",
                    "category",
                    "module",
                    "source",
                    "assignedTo",
                    "type",
                    "story",
                    "severity",
                ),
            ),
        ),
    ),
    ToolSpec(
        name="get_execution_team",
        description="Get execution team members",
        path=legacy("execution", "team"),
        params=(number("executionID", "Execution ID", required=True),),
    ),
    ToolSpec(
        name="manage_execution_members",
        description="Manage execution team members",
        method="POST",
        path=legacy("execution", "manageMembers"),
        into=QUERY,
        params=(
            number("executionID", "Execution ID", required=True),
            number("team2Import", "Team to import"),
            string("dept", "Department"),
            array("members", "Members to add", into=BODY),
        ),
    ),
    ToolSpec(
        name="unlink_execution_member",
        description="Remove a member from execution",
        path=legacy("execution", "unlinkMember"),
        params=(
            number("executionID", "Execution ID", required=True),
            number("userID", "User ID to remove", required=True),
        ),
    ),
    ToolSpec(
        name="link_story_to_execution",
        description="Link a story to an execution",
        method="POST",
        path=legacy("execution", "linkStory"),
        into=QUERY,
        params=(
            number("objectID", "Execution ID", required=True),
            string("browseType", "Browse type"),
            number("param", "Parameter value"),
            string("orderBy", "Order by field"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
            string("extra", "Extra parameters"),
            string("storyType", "Story type", enum=("story", "requirement")),
        ),
    ),
    ToolSpec(
        name="unlink_story_from_execution",
        description="Unlink a story from an execution",
        path=legacy("execution", "unlinkStory"),
        params=(
            number("executionID", "Execution ID", required=True),
            number("storyID", "Story ID", required=True),
            string("confirm", "Confirmation", enum=("yes", "no")),
            string("from", "Source"),
            number("laneID", "Lane ID"),
            number("columnID", "Column ID"),
        ),
    ),
    ToolSpec(
        name="batch_unlink_stories_from_execution",
        description="Batch unlink stories from an execution",
        method="POST",
        path=legacy("execution", "batchUnlinkStory"),
        into=QUERY,
        params=(number("executionID", "Execution ID", required=True),),
    ),
    ToolSpec(
        name="get_execution_dynamic",
        description="Get execution dynamic/activity log",
        path=legacy("execution", "dynamic"),
        params=(
            number("executionID", "Execution ID", required=True),
            string("type", "Activity type"),
            string("param", "Parameter"),
            number("recTotal", "Total records"),
            string("date", "Date"),
            string("direction", "Direction", enum=("next", "pre")),
        ),
    ),
    ToolSpec(
        name="browse_all_executions",
        description="Browse all executions",
        path=legacy("execution", "all"),
        params=(
            string("status", "Execution status"),
            string("orderBy", "Order by field"),
            number("productID", "Product ID"),
            string("param", "Parameter"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
