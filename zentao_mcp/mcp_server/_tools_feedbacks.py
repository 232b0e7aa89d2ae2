"""Feedback tools (REST-style /feedbacks)."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import ToolSpec, number, string

_FEEDBACK_FIELDS = (
    string("type", "Type (story|task|bug|todo|advice|issue|risk|opportunity)"),
    string("desc", "Description"),
    number("public", "Public (0|1)"),
    number("notify", "Notify (0|1)"),
    string("notifyEmail", "Notify email"),
    string("feedbackBy", "Feedback by user account"),
)

TOOLS = (
    ToolSpec(
        name="create_feedback",
        description="Create a new feedback in ZenTao",
        method="POST",
        path="/feedbacks",
        params=(
            number("product", "Product ID", required=True),
            string("title", "Feedback title", required=True),
            number("module", "Module ID"),
            *_FEEDBACK_FIELDS,
        ),
    ),
    ToolSpec(
        name="update_feedback",
        description="Update an existing feedback in ZenTao",
        method="PUT",
        path="/feedbacks/{id}",
        params=(
            number("id", "Feedback ID", required=True),
            number("product", "Product ID"),
            number("module", "Module ID"),
            string("title", "Title"),
            *_FEEDBACK_FIELDS,
        ),
    ),
    ToolSpec(
        name="assign_feedback",
        description="Assign a feedback to a user in ZenTao",
        method="POST",
        path="/feedbacks/{id}/assign",
        params=(
            number("id", "Feedback ID", required=True),
            string("assignedTo", "Assign to user account"),
            string("comment", "Comment"),
            string("mailto", "CC to user accounts (comma-separated)"),
        ),
    ),
    ToolSpec(
        name="close_feedback",
        description="Close a feedback in ZenTao",
        method="POST",
        path="/feedbacks/{id}/close",
        params=(
            number("id", "Feedback ID", required=True),
            string("closedReason", "Close reason (commented|repeat|refuse)"),
            string("comment", "Comment"),
        ),
    ),
    ToolSpec(
        name="delete_feedback",
        description="Delete a feedback from ZenTao",
        method="DELETE",
        path="/feedbacks/{id}",
        params=(number("id", "Feedback ID to delete", required=True),),
    ),
)


def register(registry):
    registry.add_all(TOOLS)
