"""Documentation tools, grouped the way ZenTao's doc module groups its screens.

Spaces, libraries, documents, templates, space browsing, attached files and
catalogs each get their own registrar; ``register`` runs all of them.
"""

from __future__ import annotations

from zentao_mcp.mcp_server._core import QUERY, ToolSpec, boolean, legacy, number, string

OBJECT_TYPES = ("product", "project", "execution", "custom")
BROWSE_TYPES = ("all", "draft", "bysearch")


def _doc(function):
    return legacy("doc", function)


def _listing(*, with_search=True):
    params = (
        number("libID", "Library ID"),
        number("moduleID", "Module ID"),
        string("browseType", "Browse type: all|draft|bysearch", enum=BROWSE_TYPES),
        string("orderBy", "Order by field"),
        number("param", "Parameter value"),
        number("recTotal", "Total records"),
        number("recPerPage", "Records per page"),
        number("pageID", "Page ID"),
    )
    if with_search:
        params += (number("docID", "Document ID"), string("search", "Search term"))
    return params


SPACE_TOOLS = (
    ToolSpec(
        name="doc_create_space",
        description="Create a new documentation space",
        method="POST",
        path=_doc("createSpace"),
        action="create space",
        params=(string("type", "Space type", required=True),),
    ),
    ToolSpec(
        name="doc_edit_space",
        description="Edit a documentation space",
        path=_doc("editSpace"),
        action="edit space",
        params=(number("spaceID", "Space ID", required=True),),
    ),
    ToolSpec(
        name="doc_delete_space",
        description="Delete a documentation space",
        path=_doc("deleteSpace"),
        action="delete space",
        params=(number("libID", "Library ID", required=True),),
    ),
)

LIB_TOOLS = (
    ToolSpec(
        name="doc_create_lib",
        description="Create a new documentation library",
        method="POST",
        path=_doc("createLib"),
        action="create library",
        params=(
            string(
                "type",
                "Library type: api|project|product|execution|custom|mine",
                required=True,
                enum=("api", "project", "product", "execution", "custom", "mine"),
            ),
            number("objectID", "Object ID"),
            number("libID", "Library ID"),
        ),
    ),
    ToolSpec(
        name="doc_edit_lib",
        description="Edit a documentation library",
        path=_doc("editLib"),
        action="edit library",
        params=(number("libID", "Library ID", required=True),),
    ),
    ToolSpec(
        name="doc_delete_lib",
        description="Delete a documentation library",
        path=_doc("deleteLib"),
        action="delete library",
        params=(number("libID", "Library ID", required=True),),
    ),
)

DOCUMENT_TOOLS = (
    ToolSpec(
        name="doc_create",
        description="Create a new document",
        method="POST",
        path=_doc("create"),
        action="create document",
        params=(
            string(
                "objectType",
                "Object type: product|project|execution|custom",
                required=True,
                enum=OBJECT_TYPES,
            ),
            number("objectID", "Object ID", required=True),
            string(
                "docType",
                "Document type: html|word|ppt|excel",
                required=True,
                enum=("html", "word", "ppt", "excel"),
            ),
            number("libID", "Library ID"),
            number("moduleID", "Module ID"),
            number("appendLib", "Append library"),
        ),
    ),
    ToolSpec(
        name="doc_edit",
        description="Edit a document",
        method="POST",
        path=_doc("edit"),
        action="edit document",
        params=(
            number("docID", "Document ID", required=True, into=QUERY),
            boolean("comment", "Include comments"),
            number("appendLib", "Append library"),
        ),
    ),
    ToolSpec(
        name="doc_delete",
        description="Delete a document",
        path=_doc("delete"),
        action="delete document",
        params=(number("docID", "Document ID", required=True),),
    ),
    ToolSpec(
        name="doc_view",
        description="View a document",
        path=_doc("view"),
        action="view document",
        params=(
            number("docID", "Document ID", required=True),
            number("version", "Document version"),
        ),
    ),
    ToolSpec(
        name="doc_upload_docs",
        description="Upload documents",
        method="POST",
        path=_doc("uploadDocs"),
        action="upload documents",
        params=(
            string(
                "objectType",
                "Object type: product|project|execution|custom",
                required=True,
                enum=OBJECT_TYPES,
            ),
            number("objectID", "Object ID", required=True),
            string(
                "docType",
                "Document type: html|word|ppt|excel|attachment",
                required=True,
                enum=("html", "word", "ppt", "excel", "attachment"),
            ),
            number("libID", "Library ID"),
            number("moduleID", "Module ID"),
        ),
    ),
)

TEMPLATE_TOOLS = (
    ToolSpec(
        name="doc_create_template",
        description="Create a new document template",
        method="POST",
        path=_doc("createTemplate"),
        action="create template",
        params=(number("moduleID", "Module ID", required=True),),
    ),
    ToolSpec(
        name="doc_edit_template",
        description="Edit a document template",
        method="POST",
        path=_doc("editTemplate"),
        into=QUERY,
        action="edit template",
        params=(number("docID", "Template/Document ID", required=True),),
    ),
    ToolSpec(
        name="doc_delete_template",
        description="Delete a document template",
        path=_doc("deleteTemplate"),
        action="delete template",
        params=(number("templateID", "Template ID", required=True),),
    ),
    ToolSpec(
        name="doc_browse_template",
        description="Browse document templates",
        path=_doc("browseTemplate"),
        action="browse templates",
        params=(
            number("libID", "Library ID"),
            string("type", "Template type"),
            number("docID", "Document ID"),
            string("orderBy", "Order by field"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
        ),
    ),
)

BROWSE_TOOLS = (
    ToolSpec(
        name="doc_my_space",
        description="Browse my documentation space",
        path=_doc("mySpace"),
        action="browse my space",
        params=(number("objectID", "Object ID"), *_listing()),
    ),
    ToolSpec(
        name="doc_product_space",
        description="Browse product documentation space",
        path=_doc("productSpace"),
        action="browse product space",
        params=(number("objectID", "Object ID", required=True), *_listing()),
    ),
    ToolSpec(
        name="doc_project_space",
        description="Browse project documentation space",
        path=_doc("projectSpace"),
        action="browse project space",
        params=(number("objectID", "Object ID", required=True), *_listing()),
    ),
    ToolSpec(
        name="doc_table_contents",
        description="Get table of contents for documentation",
        path=_doc("tableContents"),
        action="get table contents",
        params=(
            string(
                "type",
                "Type: custom|product|project|execution|doctemplate",
                required=True,
                enum=("custom", "product", "project", "execution", "doctemplate"),
            ),
            number("objectID", "Object ID"),
            *_listing(with_search=False),
        ),
    ),
)

FILE_TOOLS = (
    ToolSpec(
        name="doc_show_files",
        description="Show files in documentation",
        path=_doc("showFiles"),
        action="show files",
        params=(
            string("type", "Type"),
            number("objectID", "Object ID"),
            string("viewType", "View type"),
            string("browseType", "Browse type"),
            number("param", "Parameter value"),
            string("orderBy", "Order by field"),
            number("recTotal", "Total records"),
            number("recPerPage", "Records per page"),
            number("pageID", "Page ID"),
            string("searchTitle", "Search title"),
        ),
    ),
    ToolSpec(
        name="doc_delete_file",
        description="Delete a file from document",
        path=_doc("deleteFile"),
        action="delete file",
        params=(
            number("docID", "Document ID", required=True),
            number("fileID", "File ID", required=True),
            string("confirm", "Confirmation string"),
        ),
    ),
)

CATALOG_TOOLS = (
    ToolSpec(
        name="doc_edit_catalog",
        description="Edit a document catalog",
        path=_doc("editCatalog"),
        action="edit catalog",
        params=(
            number("moduleID", "Module ID", required=True),
            string("type", "Type: doc|api", required=True, enum=("doc", "api")),
        ),
    ),
    ToolSpec(
        name="doc_delete_catalog",
        description="Delete a document catalog",
        path=_doc("deleteCatalog"),
        action="delete catalog",
        params=(number("moduleID", "Module ID", required=True),),
    ),
)


def register_space_tools(registry):
    registry.add_all(SPACE_TOOLS)


def register_lib_tools(registry):
    registry.add_all(LIB_TOOLS)


def register_document_tools(registry):
    registry.add_all(DOCUMENT_TOOLS)


def register_template_tools(registry):
    registry.add_all(TEMPLATE_TOOLS)


def register_browse_tools(registry):
    registry.add_all(BROWSE_TOOLS)


def register_file_tools(registry):
    registry.add_all(FILE_TOOLS)


def register_catalog_tools(registry):
    registry.add_all(CATALOG_TOOLS)


def register(registry):
    register_space_tools(registry)
    register_lib_tools(registry)
    register_document_tools(registry)
    register_template_tools(registry)
    register_browse_tools(registry)
    register_file_tools(registry)
    register_catalog_tools(registry)
