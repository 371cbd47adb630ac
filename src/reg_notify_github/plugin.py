from typing import Any, List, Mapping, Optional, Union

import aiohttp

from reg_notify_github import config
from reg_notify_github.app_info import get_gh_app_info
from reg_notify_github.client_id import decode_client_id
from reg_notify_github.dispatch import DispatchOutcome, DispatchRequest, Dispatcher
from reg_notify_github.errors import PluginNotInitialized
from reg_notify_github.logger import PluginLogger
from reg_notify_github.model import ComparisonResult, ConnectionParameters, NotifyOptions
from reg_notify_github.payload import build_comment_to_pr_body, build_update_status_body


class GitHubNotifierPlugin:
    """
    Notifier posting regression results to the reg GitHub app.

    ``init`` must be called once before ``notify``. ``notify`` may be called
    any number of times and does not change the plugin's state.
    """

    _logger: PluginLogger
    _no_emit: bool
    _options: NotifyOptions
    _api_opt: ConnectionParameters
    _api_prefix: str

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def connection_parameters(self) -> ConnectionParameters:
        self._check_initialized()
        return self._api_opt

    @property
    def options(self) -> NotifyOptions:
        self._check_initialized()
        return self._options

    @property
    def api_prefix(self) -> str:
        self._check_initialized()
        return self._api_prefix

    def init(
        self,
        options: Union[NotifyOptions, Mapping[str, Any]],
        logger: PluginLogger,
        no_emit: bool = False,
    ) -> None:
        self._no_emit = no_emit
        self._logger = logger

        if not isinstance(options, NotifyOptions):
            options = NotifyOptions.model_validate(options)

        if options.client_id:
            self._api_opt = decode_client_id(options.client_id, logger)
        else:
            self._api_opt = options.connection_parameters()

        self._options = options
        if options.custom_endpoint:
            self._api_prefix = options.custom_endpoint.rstrip("/")
        else:
            self._api_prefix = get_gh_app_info().endpoint

        self._initialized = True

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise PluginNotInitialized("init() must be called before notify()")

    def build_requests(
        self,
        comparison_result: Union[ComparisonResult, Mapping[str, Any]],
        report_url: Optional[str] = None,
    ) -> List[DispatchRequest]:
        self._check_initialized()
        if not isinstance(comparison_result, ComparisonResult):
            comparison_result = ComparisonResult.model_validate(comparison_result)

        colors = self._logger.colors
        sha1 = config.commit_sha()
        reqs = []

        if self._options.set_commit_status:
            body = build_update_status_body(
                comparison_result, self._api_opt, sha1, report_url=report_url
            )
            req = DispatchRequest(url=f"{self._api_prefix}/api/update-status", body=body)
            self._logger.info("Update status for %s .", colors.green(body.sha1))
            self._logger.verbose("update-status: %s", req.describe())
            reqs.append(req)

        if self._options.pr_comment:
            branch_name = config.commit_branch()
            if branch_name:
                body = build_comment_to_pr_body(
                    comparison_result,
                    self._api_opt,
                    branch_name,
                    sha1,
                    behavior=self._options.pr_comment_behavior,
                    short_description=self._options.short_description,
                    report_url=report_url,
                )
                req = DispatchRequest(
                    url=f"{self._api_prefix}/api/comment-to-pr", body=body
                )
                self._logger.info(
                    "Comment to PR associated with %s .", colors.green(branch_name)
                )
                self._logger.verbose("PR comment: %s", req.describe())
                reqs.append(req)
            else:
                self._logger.verbose("No branch name is known, skip PR comment")

        return reqs

    async def notify(
        self,
        comparison_result: Union[ComparisonResult, Mapping[str, Any]],
        report_url: Optional[str] = None,
    ) -> List[DispatchOutcome]:
        reqs = self.build_requests(comparison_result, report_url=report_url)
        dispatcher = Dispatcher(
            self._logger,
            dry_run=self._no_emit,
            timeout=self._options.timeout,
            session=self._session,
        )
        return await dispatcher.dispatch(reqs)
