import asyncio
from dataclasses import dataclass
import json
from typing import Any, Iterable, List, Literal, Optional

import aiohttp

from reg_notify_github.errors import TransportError, classify_error
from reg_notify_github.logger import PluginLogger
from reg_notify_github.metric import record_request
from reg_notify_github.model import Model

Method = Literal["GET", "POST", "PUT", "DELETE"]
OutcomeResult = Literal["ok", "application_error", "transport_error"]

SPINNER_TEXT = "sending notification to GitHub..."


@dataclass(frozen=True)
class DispatchRequest:
    url: str
    body: Model
    method: Method = "POST"

    def describe(self) -> str:
        return json.dumps(
            {"url": self.url, "method": self.method, "body": self.body.to_body()}
        )


@dataclass(frozen=True)
class DispatchOutcome:
    request: DispatchRequest
    result: OutcomeResult
    status: Optional[int] = None
    error: Optional[Exception] = None


async def _read_body(resp: aiohttp.ClientResponse) -> Any:
    # error pages from proxies are not always utf-8
    text = (await resp.read()).decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


class Dispatcher:
    """
    Sends notification requests concurrently.

    Every request is attempted exactly once. Application errors reported by
    the remote API are logged and suppressed, any other failure is re-raised
    once all requests have settled.
    """

    logger: PluginLogger
    dry_run: bool
    timeout: Optional[float]

    def __init__(
        self,
        logger: PluginLogger,
        *,
        dry_run: bool = False,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.logger = logger
        self.dry_run = dry_run
        self.timeout = timeout
        self._session = session

    async def dispatch(self, requests: Iterable[DispatchRequest]) -> List[DispatchOutcome]:
        requests = list(requests)
        if self.dry_run:
            for req in requests:
                record_request(req.url, "dry_run")
            return []
        if not requests:
            return []

        spinner = self.logger.get_spinner(SPINNER_TEXT)
        spinner.start()
        try:
            outcomes = await self._send_all(requests)
        finally:
            spinner.stop()

        for outcome in outcomes:
            if outcome.result == "transport_error":
                raise outcome.error
        return outcomes

    async def _send_all(self, requests: List[DispatchRequest]) -> List[DispatchOutcome]:
        if self._session is not None:
            return await self._gather(self._session, requests)

        async with aiohttp.ClientSession() as session:
            return await self._gather(session, requests)

    async def _gather(
        self, session: aiohttp.ClientSession, requests: List[DispatchRequest]
    ) -> List[DispatchOutcome]:
        results = await asyncio.gather(
            *(self._request(session, r) for r in requests), return_exceptions=True
        )
        return [self._outcome(req, res) for req, res in zip(requests, results)]

    def _outcome(self, req: DispatchRequest, result: Any) -> DispatchOutcome:
        if not isinstance(result, BaseException):
            record_request(req.url, "ok")
            return DispatchOutcome(req, "ok", status=result)
        if not isinstance(result, Exception):
            raise result

        app_error = classify_error(result)
        if app_error is None:
            record_request(req.url, "transport_error")
            return DispatchOutcome(req, "transport_error", error=result)
        self.logger.error(self.logger.colors.red(app_error.message))
        record_request(req.url, "application_error")
        return DispatchOutcome(
            req, "application_error", status=app_error.status, error=app_error
        )

    async def _request(self, session: aiohttp.ClientSession, req: DispatchRequest) -> int:
        kwargs = {}
        if self.timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        async with session.request(
            req.method, req.url, json=req.body.to_body(), **kwargs
        ) as resp:
            if resp.status >= 400:
                raise TransportError(resp.status, req.url, await _read_body(resp))
            return resp.status
