"""AI module tools: mini programs, prompts and role templates."""

from __future__ import annotations

from zentao_mcp.mcp_server._core import BODY, QUERY, ToolSpec, boolean, legacy, number, string


def _ai(function):
    return legacy("ai", function)


def _listing(filter_name, filter_description):
    return (
        string(filter_name, filter_description),
        string("status", "Filter by status"),
        string("orderBy", "Sort order"),
        number("recTotal", "Total records"),
        number("recPerPage", "Records per page"),
        number("pageID", "Page ID for pagination"),
    )


def _prompt_id():
    return number("promptID", "Prompt ID", required=True, into=QUERY)


MINI_PROGRAM_TOOLS = (
    ToolSpec(
        name="get_ai_admin_index",
        description="Get AI module admin interface overview",
        path=_ai("adminIndex"),
        action="get AI admin index",
    ),
    ToolSpec(
        name="get_mini_programs",
        description="Get list of AI mini programs with filtering",
        path=_ai("miniPrograms"),
        params=_listing("category", "Filter by category"),
    ),
    ToolSpec(
        name="edit_mini_program_category",
        description="Edit mini program category",
        method="POST",
        path=_ai("editMiniProgramCategory"),
        params=(string("category_data", "Category data as JSON string", required=True),),
    ),
    ToolSpec(
        name="publish_mini_program",
        description="Publish an AI mini program",
        path=_ai("publishMiniProgram"),
        params=(string("appID", "Mini program application ID", required=True),),
    ),
    ToolSpec(
        name="unpublish_mini_program",
        description="Unpublish an AI mini program",
        path=_ai("unpublishMiniProgram"),
        params=(string("appID", "Mini program application ID", required=True),),
    ),
    ToolSpec(
        name="import_mini_program",
        description="Import AI mini program",
        method="POST",
        path=_ai("importMiniProgram"),
        params=(string("import_data", "Import data as JSON string", required=True),),
    ),
)

PROMPT_TOOLS = (
    ToolSpec(
        name="get_prompts",
        description="Get list of AI prompts with filtering",
        path=_ai("prompts"),
        params=_listing("module", "Filter by module"),
    ),
    ToolSpec(
        name="get_prompt_view",
        description="Get detailed view of a specific AI prompt",
        path=_ai("promptView"),
        params=(number("id", "Prompt ID", required=True),),
    ),
    ToolSpec(
        name="create_prompt",
        description="Create a new AI prompt",
        method="POST",
        path=_ai("createPrompt"),
        params=(string("prompt_data", "Prompt data as JSON string", required=True),),
    ),
    ToolSpec(
        name="edit_prompt",
        description="Edit an existing AI prompt",
        method="POST",
        path=_ai("promptEdit"),
        params=(
            number("id", "Prompt ID", required=True, into=(QUERY, BODY)),
            string("prompt_data", "Updated prompt data as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="delete_prompt",
        description="Delete an AI prompt",
        path=_ai("promptDelete"),
        params=(number("prompt", "Prompt ID to delete", required=True),),
    ),
    ToolSpec(
        name="assign_prompt_role",
        description="Assign role to an AI prompt",
        method="POST",
        path=_ai("promptAssignRole"),
        params=(
            _prompt_id(),
            string("role_data", "Role assignment data as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="select_prompt_data_source",
        description="Select data source for an AI prompt",
        method="POST",
        path=_ai("promptSelectDataSource"),
        params=(
            _prompt_id(),
            string("data_source", "Data source configuration as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="set_prompt_purpose",
        description="Set purpose for an AI prompt",
        method="POST",
        path=_ai("promptSetPurpose"),
        params=(
            _prompt_id(),
            string("purpose", "Prompt purpose description", required=True),
        ),
    ),
    ToolSpec(
        name="set_prompt_target_form",
        description="Set target form for an AI prompt",
        method="POST",
        path=_ai("promptSetTargetForm"),
        params=(
            _prompt_id(),
            string("target_form", "Target form configuration as JSON string", required=True),
        ),
    ),
    ToolSpec(
        name="finalize_prompt",
        description="Finalize an AI prompt",
        method="POST",
        path=_ai("promptFinalize"),
        params=(_prompt_id(), string("final_config", "Final configuration as JSON string")),
    ),
    ToolSpec(
        name="execute_prompt",
        description="Execute an AI prompt",
        path=_ai("promptExecute"),
        params=(
            number("promptId", "Prompt ID", required=True),
            number("objectId", "Object ID to execute prompt on", required=True),
            boolean("auto", "Auto open target form and apply changes", to="flag"),
        ),
    ),
    ToolSpec(
        name="reset_prompt_execution",
        description="Reset prompt execution state",
        path=_ai("promptExecutionReset"),
        params=(boolean("failed", "Whether the execution failed", to="flag"),),
    ),
    ToolSpec(
        name="audit_prompt",
        description="Audit an AI prompt execution",
        method="POST",
        path=_ai("promptAudit"),
        into=QUERY,
        params=(
            number("promptId", "Prompt ID", required=True),
            number("objectId", "Object ID", required=True),
            boolean("exit", "Exit flag", to="flag"),
            string("audit_data", "Audit data as JSON string", into=BODY),
        ),
    ),
    ToolSpec(
        name="publish_prompt",
        description="Publish an AI prompt",
        path=_ai("promptPublish"),
        params=(
            number("id", "Prompt ID", required=True),
            boolean("backToTestingLocation", "Back to testing location flag", to="flag"),
        ),
    ),
    ToolSpec(
        name="unpublish_prompt",
        description="Unpublish an AI prompt",
        path=_ai("promptUnpublish"),
        params=(number("id", "Prompt ID", required=True),),
    ),
    ToolSpec(
        name="get_testing_location",
        description="Get testing location for a prompt",
        path=_ai("ajaxGetTestingLocation"),
        params=(
            number("promptID", "Prompt ID", required=True),
            string("module", "Module name"),
            string("targetForm", "Target form name"),
        ),
    ),
    ToolSpec(
        name="get_role_templates",
        description="Get AI role templates",
        method="POST",
        path=_ai("roleTemplates"),
        params=(string("template_data", "Template filter data as JSON string"),),
    ),
)


def register(registry):
    registry.add_all(MINI_PROGRAM_TOOLS)
    registry.add_all(PROMPT_TOOLS)
