from typing import Any, Dict, List, Literal, Optional

import pydantic

PrCommentBehavior = Literal["default", "once", "new"]
CommitState = Literal["success", "failure"]


class Model(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ConnectionParameters(Model):
    model_config = pydantic.ConfigDict(frozen=True)

    owner: str
    repository: str
    installation_id: str = pydantic.Field(alias="installationId")

    @pydantic.field_validator("installation_id", mode="before")
    @classmethod
    def installation_id_as_str(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value


class NotifyOptions(Model):
    model_config = pydantic.ConfigDict(frozen=True, extra="ignore")

    client_id: Optional[str] = pydantic.Field(None, alias="clientId")
    owner: Optional[str] = None
    repository: Optional[str] = None
    installation_id: Optional[str] = pydantic.Field(None, alias="installationId")

    pr_comment: bool = pydantic.Field(True, alias="prComment")
    pr_comment_behavior: PrCommentBehavior = pydantic.Field(
        "default", alias="prCommentBehavior"
    )
    set_commit_status: bool = pydantic.Field(True, alias="setCommitStatus")
    short_description: bool = pydantic.Field(False, alias="shortDescription")
    custom_endpoint: Optional[str] = pydantic.Field(None, alias="customEndpoint")

    timeout: Optional[float] = None

    @pydantic.field_validator("installation_id", mode="before")
    @classmethod
    def installation_id_as_str(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @pydantic.field_validator(
        "pr_comment",
        "pr_comment_behavior",
        "set_commit_status",
        "short_description",
        mode="before",
    )
    @classmethod
    def null_means_default(cls, value: Any, info: pydantic.ValidationInfo) -> Any:
        # null from the host config is the same as leaving the key out
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @pydantic.model_validator(mode="after")
    def check_connection(self) -> "NotifyOptions":
        if self.client_id:
            return self
        if not (self.owner and self.repository and self.installation_id):
            raise ValueError(
                "Provide either clientId or owner, repository and installationId"
            )
        return self

    def connection_parameters(self) -> ConnectionParameters:
        return ConnectionParameters(
            owner=self.owner,
            repository=self.repository,
            installation_id=self.installation_id,
        )


class ComparisonResult(Model):
    model_config = pydantic.ConfigDict(extra="ignore")

    failed_items: List[str] = pydantic.Field(default_factory=list, alias="failedItems")
    new_items: List[str] = pydantic.Field(default_factory=list, alias="newItems")
    deleted_items: List[str] = pydantic.Field(
        default_factory=list, alias="deletedItems"
    )
    passed_items: List[str] = pydantic.Field(default_factory=list, alias="passedItems")

    @property
    def state(self) -> CommitState:
        if len(self.failed_items) + len(self.new_items) + len(self.deleted_items) == 0:
            return "success"
        return "failure"


class UpdateStatusBody(ConnectionParameters):
    sha1: Optional[str] = None
    description: str
    state: CommitState
    report_url: Optional[str] = pydantic.Field(None, alias="reportUrl")


class CommentToPrBody(ConnectionParameters):
    branch_name: str = pydantic.Field(alias="branchName")
    head_oid: Optional[str] = pydantic.Field(None, alias="headOid")
    failed_items_count: int = pydantic.Field(alias="failedItemsCount")
    new_items_count: int = pydantic.Field(alias="newItemsCount")
    deleted_items_count: int = pydantic.Field(alias="deletedItemsCount")
    passed_items_count: int = pydantic.Field(alias="passedItemsCount")
    short_description: bool = pydantic.Field(False, alias="shortDescription")
    report_url: Optional[str] = pydantic.Field(None, alias="reportUrl")
    behavior: Optional[PrCommentBehavior] = None
