from typing import Optional

from reg_notify_github.model import (
    CommentToPrBody,
    ComparisonResult,
    ConnectionParameters,
    PrCommentBehavior,
    UpdateStatusBody,
)

DESCRIPTIONS = {
    "success": "Regression testing passed",
    "failure": "Regression testing failed",
}


def build_update_status_body(
    result: ComparisonResult,
    params: ConnectionParameters,
    sha1: Optional[str],
    report_url: Optional[str] = None,
) -> UpdateStatusBody:
    state = result.state
    return UpdateStatusBody(
        owner=params.owner,
        repository=params.repository,
        installation_id=params.installation_id,
        sha1=sha1,
        description=DESCRIPTIONS[state],
        state=state,
        report_url=report_url or None,
    )


def build_comment_to_pr_body(
    result: ComparisonResult,
    params: ConnectionParameters,
    branch_name: str,
    sha1: Optional[str],
    behavior: PrCommentBehavior = "default",
    short_description: bool = False,
    report_url: Optional[str] = None,
) -> CommentToPrBody:
    return CommentToPrBody(
        owner=params.owner,
        repository=params.repository,
        installation_id=params.installation_id,
        branch_name=branch_name,
        head_oid=sha1,
        failed_items_count=len(result.failed_items),
        new_items_count=len(result.new_items),
        deleted_items_count=len(result.deleted_items),
        passed_items_count=len(result.passed_items),
        short_description=short_description,
        report_url=report_url or None,
        # the app treats a missing behavior as "default"
        behavior=None if behavior == "default" else behavior,
    )
