"""
Declarative description of the SeggWat node.

Lists the resources, operations and form fields the host renders, along with
the display conditions that decide which fields belong to which operation.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from seggwat.credentials import CREDENTIAL_NAME
from seggwat.schemas import FEEDBACK_SOURCES, FEEDBACK_STATUSES, FEEDBACK_TYPES

PropertyType = Literal["options", "string", "boolean", "number", "collection"]


class PropertyOption(BaseModel):
    """One choice of an options field."""
    name: str
    value: Any
    description: Optional[str] = None
    action: Optional[str] = None


class DisplayOptions(BaseModel):
    """Show a property only when every named parameter holds one of the listed values."""
    show: Dict[str, List[Any]] = Field(default_factory=dict)

    def matches(self, values: Dict[str, Any]) -> bool:
        return all(values.get(name) in allowed for name, allowed in self.show.items())


class NodeProperty(BaseModel):
    """A form field of the node."""
    display_name: str
    name: str
    type: PropertyType
    default: Any = None
    required: bool = False
    description: Optional[str] = None
    placeholder: Optional[str] = None
    no_data_expression: bool = False
    options: List[PropertyOption] = Field(default_factory=list, description="Choices of an options field")
    fields: List["NodeProperty"] = Field(default_factory=list, description="Children of a collection field")
    type_options: Dict[str, Any] = Field(default_factory=dict)
    display_options: Optional[DisplayOptions] = None

    def is_visible(self, values: Dict[str, Any]) -> bool:
        return self.display_options is None or self.display_options.matches(values)

    @property
    def load_options_method(self) -> Optional[str]:
        return self.type_options.get("load_options_method")

    def option_values(self) -> List[Any]:
        return [option.value for option in self.options]

    def field(self, name: str) -> Optional["NodeProperty"]:
        for child in self.fields:
            if child.name == name:
                return child
        return None


NodeProperty.model_rebuild()


class CredentialRef(BaseModel):
    name: str
    required: bool = True


class NodeDescription(BaseModel):
    """Everything the host needs to register and render the node."""
    display_name: str
    name: str
    description: str
    version: int = 1
    group: List[str] = Field(default_factory=list)
    subtitle: Optional[str] = None
    defaults: Dict[str, Any] = Field(default_factory=dict)
    credentials: List[CredentialRef] = Field(default_factory=list)
    properties: List[NodeProperty] = Field(default_factory=list)

    def resources(self) -> List[str]:
        return [option.value for option in self._property("resource").options]

    def operations(self, resource: str) -> List[str]:
        """Operation values offered for ``resource``."""
        for prop in self.properties:
            if prop.name == "operation" and prop.is_visible({"resource": resource}):
                return prop.option_values()
        return []

    def _property(self, name: str) -> NodeProperty:
        for prop in self.properties:
            if prop.name == name:
                return prop
        raise KeyError(name)


def _show(resource: str, operation: Optional[str] = None, **extra: List[Any]) -> DisplayOptions:
    show: Dict[str, List[Any]] = {"resource": [resource]}
    if operation:
        show["operation"] = [operation]
    show.update(extra)
    return DisplayOptions(show=show)


def _choices(values: List[str]) -> List[PropertyOption]:
    return [PropertyOption(name=value, value=value) for value in values]


def _project(resource: str, operation: str, description: str) -> NodeProperty:
    return NodeProperty(
        display_name="Project",
        name="projectId",
        type="options",
        type_options={"load_options_method": "getProjects"},
        default="",
        required=True,
        display_options=_show(resource, operation),
        description=description,
    )


def _record_id(resource: str, operation: str, description: str) -> NodeProperty:
    label = "Feedback ID" if resource == "feedback" else "Rating ID"
    return NodeProperty(
        display_name=label,
        name="feedbackId" if resource == "feedback" else "ratingId",
        type="string",
        default="",
        required=True,
        placeholder="e.g. 123e4567-e89b-12d3-a456-426614174000",
        display_options=_show(resource, operation),
        description=description,
    )


def _simplify(resource: str, operation: str) -> NodeProperty:
    return NodeProperty(
        display_name="Simplify",
        name="simplify",
        type="boolean",
        default=True,
        display_options=_show(resource, operation),
        description="Whether to return a simplified version of the response instead of the raw data",
    )


def _list_paging(resource: str) -> List[NodeProperty]:
    return [
        NodeProperty(
            display_name="Return All",
            name="returnAll",
            type="boolean",
            default=False,
            display_options=_show(resource, "list"),
            description="Whether to return all results or only up to a given limit",
        ),
        NodeProperty(
            display_name="Limit",
            name="limit",
            type="number",
            type_options={"min_value": 1, "max_value": 100},
            default=20,
            display_options=_show(resource, "list", returnAll=[False]),
            description="Max number of results to return",
        ),
        _simplify(resource, "list"),
    ]


def _sort_option(resource: str, choices: List[PropertyOption]) -> NodeProperty:
    return NodeProperty(
        display_name="Options",
        name="options",
        type="collection",
        placeholder="Add Option",
        default={},
        display_options=_show(resource, "list"),
        fields=[
            NodeProperty(
                display_name="Sort",
                name="sort",
                type="options",
                options=choices,
                default="-created_at",
                description="How to sort the results",
            ),
        ],
    )


_CREATED_SORTS = [
    PropertyOption(name="Created (Newest First)", value="-created_at"),
    PropertyOption(name="Created (Oldest First)", value="created_at"),
]

_UPDATED_SORTS = [
    PropertyOption(name="Updated (Newest First)", value="-updated_at"),
    PropertyOption(name="Updated (Oldest First)", value="updated_at"),
]


RESOURCE_PROPERTY = NodeProperty(
    display_name="Resource",
    name="resource",
    type="options",
    no_data_expression=True,
    options=[
        PropertyOption(name="Feedback", value="feedback"),
        PropertyOption(name="Rating", value="rating"),
    ],
    default="feedback",
)

FEEDBACK_OPERATION_PROPERTY = NodeProperty(
    display_name="Operation",
    name="operation",
    type="options",
    no_data_expression=True,
    display_options=_show("feedback"),
    options=[
        PropertyOption(name="Submit", value="submit", description="Create a new feedback entry in a project", action="Submit feedback"),
        PropertyOption(name="List", value="list", description="Retrieve all feedback items with optional filtering", action="List feedback"),
        PropertyOption(name="Get", value="get", description="Retrieve a specific feedback item by ID", action="Get feedback"),
        PropertyOption(name="Update", value="update", description="Modify an existing feedback item", action="Update feedback"),
        PropertyOption(name="Delete", value="delete", description="Remove a feedback item permanently", action="Delete feedback"),
    ],
    default="list",
)

RATING_OPERATION_PROPERTY = NodeProperty(
    display_name="Operation",
    name="operation",
    type="options",
    no_data_expression=True,
    display_options=_show("rating"),
    options=[
        PropertyOption(name="Submit", value="submit", description="Create a new helpful/not helpful rating for content", action="Submit rating"),
        PropertyOption(name="List", value="list", description="Retrieve all ratings with optional filtering by path or value", action="List ratings"),
        PropertyOption(name="Get", value="get", description="Retrieve a specific rating by ID", action="Get rating"),
        PropertyOption(name="Get Statistics", value="stats", description="Retrieve aggregated rating statistics and metrics", action="Get rating statistics"),
        PropertyOption(name="Delete", value="delete", description="Remove a rating permanently", action="Delete rating"),
    ],
    default="list",
)


FEEDBACK_PROPERTIES = [
    # Submit
    _project("feedback", "submit", "The project to submit feedback to"),
    NodeProperty(
        display_name="Message",
        name="message",
        type="string",
        type_options={"rows": 4},
        default="",
        required=True,
        display_options=_show("feedback", "submit"),
        description="The feedback message content",
    ),
    NodeProperty(
        display_name="Additional Fields",
        name="additionalFields",
        type="collection",
        placeholder="Add Field",
        default={},
        display_options=_show("feedback", "submit"),
        fields=[
            NodeProperty(display_name="Path", name="path", type="string", default="",
                         placeholder="e.g. /docs/getting-started",
                         description="The page path where feedback was submitted"),
            NodeProperty(display_name="Version", name="version", type="string", default="",
                         placeholder="e.g. 1.2.3", description="Application version"),
            NodeProperty(display_name="Source", name="source", type="options", options=_choices(FEEDBACK_SOURCES),
                         default="Manual", description="Where the feedback came from"),
            NodeProperty(display_name="Submitted By", name="submitted_by", type="string", default="",
                         placeholder="e.g. user@example.com",
                         description="User identifier who submitted the feedback"),
        ],
    ),
    # List
    _project("feedback", "list", "The project to list feedback from"),
    *_list_paging("feedback"),
    NodeProperty(
        display_name="Filters",
        name="filters",
        type="collection",
        placeholder="Add Filter",
        default={},
        display_options=_show("feedback", "list"),
        fields=[
            NodeProperty(display_name="Status", name="status", type="options", options=_choices(FEEDBACK_STATUSES),
                         default="", description="Filter by feedback status"),
            NodeProperty(display_name="Type", name="type", type="options", options=_choices(FEEDBACK_TYPES),
                         default="", description="Filter by feedback type"),
            NodeProperty(display_name="Search", name="search", type="string", default="",
                         description="Search term to filter feedback messages"),
        ],
    ),
    _sort_option("feedback", _CREATED_SORTS + _UPDATED_SORTS),
    # Get
    _project("feedback", "get", "The project the feedback belongs to"),
    _record_id("feedback", "get", "The ID of the feedback item to retrieve"),
    _simplify("feedback", "get"),
    # Update
    _project("feedback", "update", "The project the feedback belongs to"),
    _record_id("feedback", "update", "The ID of the feedback item to update"),
    NodeProperty(
        display_name="Update Fields",
        name="updateFields",
        type="collection",
        placeholder="Add Field",
        default={},
        display_options=_show("feedback", "update"),
        fields=[
            NodeProperty(display_name="Message", name="message", type="string", type_options={"rows": 4},
                         default="", description="Updated feedback message"),
            NodeProperty(display_name="Type", name="type", type="options", options=_choices(FEEDBACK_TYPES),
                         default="", description="Updated feedback type"),
            NodeProperty(display_name="Status", name="status", type="options", options=_choices(FEEDBACK_STATUSES),
                         default="", description="Updated feedback status"),
        ],
    ),
    # Delete
    _project("feedback", "delete", "The project the feedback belongs to"),
    _record_id("feedback", "delete", "The ID of the feedback item to delete"),
]


RATING_PROPERTIES = [
    # Submit
    _project("rating", "submit", "The project to submit rating to"),
    NodeProperty(
        display_name="Value",
        name="value",
        type="options",
        options=[
            PropertyOption(name="Helpful (👍)", value=True),
            PropertyOption(name="Not Helpful (👎)", value=False),
        ],
        default=True,
        required=True,
        display_options=_show("rating", "submit"),
        description="Whether the content was helpful or not",
    ),
    NodeProperty(
        display_name="Path",
        name="path",
        type="string",
        default="",
        required=True,
        placeholder="e.g. /docs/getting-started",
        display_options=_show("rating", "submit"),
        description="The page path being rated",
    ),
    NodeProperty(
        display_name="Additional Fields",
        name="additionalFields",
        type="collection",
        placeholder="Add Field",
        default={},
        display_options=_show("rating", "submit"),
        fields=[
            NodeProperty(display_name="Version", name="version", type="string", default="",
                         placeholder="e.g. 1.2.3", description="Application version"),
            NodeProperty(display_name="Submitted By", name="submitted_by", type="string", default="",
                         placeholder="e.g. user@example.com",
                         description="User identifier who submitted the rating"),
        ],
    ),
    # List
    _project("rating", "list", "The project to list ratings from"),
    *_list_paging("rating"),
    NodeProperty(
        display_name="Filters",
        name="filters",
        type="collection",
        placeholder="Add Filter",
        default={},
        display_options=_show("rating", "list"),
        fields=[
            NodeProperty(
                display_name="Value",
                name="value",
                type="options",
                options=[
                    PropertyOption(name="All", value=""),
                    PropertyOption(name="Helpful", value="true"),
                    PropertyOption(name="Not Helpful", value="false"),
                ],
                default="",
                description="Filter by rating value",
            ),
            NodeProperty(display_name="Path", name="path", type="string", default="",
                         description="Filter by exact path match"),
        ],
    ),
    _sort_option("rating", _CREATED_SORTS),
    # Get
    _project("rating", "get", "The project the rating belongs to"),
    _record_id("rating", "get", "The ID of the rating to retrieve"),
    _simplify("rating", "get"),
    # Stats
    _project("rating", "stats", "The project to get statistics for"),
    NodeProperty(
        display_name="Path Filter",
        name="pathFilter",
        type="string",
        default="",
        placeholder="e.g. /docs/api",
        display_options=_show("rating", "stats"),
        description="Optional path to filter statistics (leave empty for project-wide stats)",
    ),
    # Delete
    _project("rating", "delete", "The project the rating belongs to"),
    _record_id("rating", "delete", "The ID of the rating to delete"),
]


NODE_DESCRIPTION = NodeDescription(
    display_name="SeggWat",
    name="seggwat",
    description="Manage feedback and ratings in SeggWat",
    group=["transform"],
    subtitle='={{$parameter["resource"] + ": " + $parameter["operation"]}}',
    defaults={"name": "SeggWat"},
    credentials=[CredentialRef(name=CREDENTIAL_NAME, required=True)],
    properties=[
        RESOURCE_PROPERTY,
        FEEDBACK_OPERATION_PROPERTY,
        RATING_OPERATION_PROPERTY,
        *FEEDBACK_PROPERTIES,
        *RATING_PROPERTIES,
    ],
)
