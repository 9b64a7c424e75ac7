"""
Input models for the GitHub tools and the validation step run before dispatch
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError


RepositoryType = Literal["all", "public", "private", "forks", "sources"]
RepositorySort = Literal["created", "updated", "pushed", "full_name"]
ItemState = Literal["open", "closed", "all"]


class ToolInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ListRepositoriesInput(ToolInput):
    owner: str = Field(min_length=1)
    type: RepositoryType = "all"
    sort: RepositorySort = "updated"


class RepositoryInput(ToolInput):
    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)


class GetRepositoryInput(RepositoryInput):
    pass


class ListPullRequestsInput(RepositoryInput):
    state: ItemState = "open"
    author: Optional[str] = None


class PullRequestInput(RepositoryInput):
    pr_number: StrictInt = Field(gt=0)


class GetPullRequestInput(PullRequestInput):
    pass


class AddPullRequestCommentInput(PullRequestInput):
    body: str = Field(min_length=1)


class ListIssuesInput(RepositoryInput):
    state: ItemState = "open"
    # Comma-separated label names, passed through to the API as-is
    labels: Optional[str] = None


class CreateIssueInput(RepositoryInput):
    title: str = Field(min_length=1)
    body: Optional[str] = None
    labels: Optional[List[str]] = None


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class Valid:
    value: ToolInput


@dataclass(frozen=True)
class Invalid:
    errors: Tuple[FieldError, ...]

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "Invalid":
        return cls(tuple(
            FieldError(
                field=".".join(str(part) for part in detail["loc"]) or "(arguments)",
                message=detail["msg"]
            )
            for detail in error.errors()
        ))

    def describe(self) -> str:
        details = "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        return f"Invalid arguments: {details}"


ValidationOutcome = Union[Valid, Invalid]


def validate_input(model: Type[ToolInput], arguments: Dict[str, Any]) -> ValidationOutcome:
    """
    Validate raw tool arguments against an input model

    Args:
        model: Input model class for the tool
        arguments: Raw arguments as received from the caller

    Returns:
        Valid with the typed input, or Invalid with one FieldError per problem
    """
    try:
        return Valid(model.model_validate(arguments))
    except ValidationError as e:
        return Invalid.from_validation_error(e)
