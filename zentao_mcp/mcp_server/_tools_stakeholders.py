"""Stakeholder tools (m=stakeholder)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, array, legacy, number, string

STAKEHOLDER_TYPES = ("inside", "outside")


def _stakeholder(function):
    return legacy("stakeholder", function)


def _stakeholder_id():
    return number("stakeholderID", "Stakeholder ID", required=True, into=QUERY)


def _contact_fields():
    return (
        string("name", "Stakeholder name"),
        string("company", "Company"),
        string("phone", "Phone"),
        string("email", "Email"),
        string("qq", "QQ"),
        string("weixin", "WeChat"),
    )


TOOLS = (
    ToolSpec(
        name="browse_stakeholders",
        description="Browse stakeholders for a project",
        path=_stakeholder("browse"),
        params=(
            number("projectID", "Project ID"),
            string("browseType", "Browse type", enum=("all", "inside", "outside", "key")),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
    ToolSpec(
        name="create_stakeholder",
        description="Create a new stakeholder",
        method="POST",
        path=_stakeholder("create"),
        params=(
            number("objectID", "Object ID (program/project)", required=True, into=QUERY),
            number("user", "User ID", required=True),
            string("role", "Stakeholder role"),
            string("type", "Stakeholder type", enum=STAKEHOLDER_TYPES),
            string("from", "Source"),
            *_contact_fields(),
        ),
    ),
    ToolSpec(
        name="batch_create_stakeholders",
        description="Create multiple stakeholders at once",
        method="POST",
        path=_stakeholder("batchCreate"),
        into=QUERY,
        params=(
            number("projectID", "Project ID", required=True),
            string("dept", "Department"),
            number("parentID", "Parent stakeholder ID"),
            array("users", "User IDs to add as stakeholders", required=True, into=BODY),
        ),
    ),
    ToolSpec(
        name="edit_stakeholder",
        description="Edit an existing stakeholder",
        method="POST",
        path=_stakeholder("edit"),
        params=(
            _stakeholder_id(),
            string("role", "Stakeholder role"),
            string("type", "Stakeholder type", enum=STAKEHOLDER_TYPES),
            *_contact_fields(),
            string("key", "Key stakeholder flag"),
        ),
    ),
    ToolSpec(
        name="get_stakeholder_members",
        description="Get stakeholder members for program/project",
        path=_stakeholder("ajaxGetMembers"),
        params=(number("programID", "Program ID"), number("projectID", "Project ID")),
    ),
    ToolSpec(
        name="get_company_users",
        description="Get company users for stakeholder management",
        path=_stakeholder("ajaxGetCompanyUser"),
        params=(number("programID", "Program ID"), number("projectID", "Project ID")),
    ),
    ToolSpec(
        name="get_outside_users",
        description="Get outside users for stakeholder management",
        path=_stakeholder("ajaxGetOutsideUser"),
        params=(number("objectID", "Object ID", required=True),),
    ),
    ToolSpec(
        name="delete_stakeholder",
        description="Delete a stakeholder",
        path=_stakeholder("delete"),
        params=(number("userID", "User ID to remove as stakeholder", required=True),),
    ),
    ToolSpec(
        name="view_stakeholder",
        description="View stakeholder details",
        path=_stakeholder("view"),
        params=(number("stakeholderID", "Stakeholder ID", required=True),),
    ),
    ToolSpec(
        name="communicate_stakeholder",
        description="Record communication with stakeholder",
        method="POST",
        path=_stakeholder("communicate"),
        action="communicate with stakeholder",
        params=(
            _stakeholder_id(),
            string("mode", "Communication mode"),
            string("content", "Communication content"),
            string("date", "Communication date"),
            string("contactedBy", "Contacted by"),
            string("feedback", "Stakeholder feedback"),
        ),
    ),
    ToolSpec(
        name="stakeholder_expect",
        description="Record stakeholder expectations",
        method="POST",
        path=_stakeholder("expect"),
        action="record stakeholder expectations",
        params=(
            _stakeholder_id(),
            string("expect", "Stakeholder expectations"),
            string("keyNote", "Key notes"),
        ),
    ),
    ToolSpec(
        name="get_stakeholder_issues",
        description="Get issues related to stakeholder",
        path=_stakeholder("userIssue"),
        params=(number("stakeholderID", "Stakeholder ID", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
