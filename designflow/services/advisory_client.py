# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Advisory oracle client: outbound calls to the generative model.
Handles HTTP calls with timeout & fault tolerance. Every failure degrades to
"no suggestions" / a fallback summary; nothing here raises to the caller.
"""

import json
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from designflow.core.config import settings
from designflow.core.errors import OracleUnavailable
from designflow.core.logging import get_logger
from designflow.metrics.prometheus import ORACLE_FAILURES
from designflow.models.domain import Designer, DesignRequest, Suggestion

logger = get_logger(__name__)

NO_KEY_INSIGHT = "AI Insights unavailable (No API Key)."
FAILED_INSIGHT = "Could not generate insights."

SUGGESTION_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "requestId": {"type": "STRING"},
            "designerId": {"type": "STRING"},
            "rationale": {"type": "STRING"},
        },
        "required": ["requestId", "designerId", "rationale"],
    },
}


class OracleSuggestion(BaseModel):
    """Wire shape of one suggestion. Unknown keys reject the entry."""
    model_config = ConfigDict(extra="forbid", strict=True)

    requestId: str = Field(..., min_length=1)
    designerId: str = Field(..., min_length=1)
    rationale: str


def build_assignment_prompt(
    designers: list[Designer], pending: list[DesignRequest]
) -> str:
    designer_summary = [
        {
            "id": d.id,
            "name": d.name,
            "skills": d.skills,
            "assigned": d.assigned_hours,
        }
        for d in designers
    ]
    request_summary = [
        {
            "id": r.id,
            "title": r.title,
            "type": r.type,
            "estHours": r.estimated_hours,
        }
        for r in pending
    ]
    return (
        "You are a resource manager for a design agency.\n\n"
        f"Here are the Designers:\n{json.dumps(designer_summary)}\n\n"
        f"Here are the Pending Requests:\n{json.dumps(request_summary)}\n\n"
        "Please assign the pending requests to the best matching designer "
        "based on skills and current load.\n"
        "Return a JSON array of objects with 'requestId', 'designerId', "
        "and 'rationale'."
    )


def build_insights_prompt(period: str, stats: dict[str, Any]) -> str:
    return (
        f"Analyze the following design team performance stats for the {period} period.\n"
        "Provide a concise, 3-bullet point executive summary highlighting key "
        "trends, utilization risks, or achievements.\n\n"
        f"Stats: {json.dumps(stats, default=str)}"
    )


def parse_suggestions(
    text: str,
    designer_ids: set[str],
    request_ids: set[str],
) -> list[Suggestion]:
    """
    Validate raw oracle text against the suggestion schema.
    A non-list payload raises OracleUnavailable; bad entries are dropped.
    """
    try:
        payload = json.loads(text or "[]")
    except json.JSONDecodeError as exc:
        raise OracleUnavailable(f"Suggestion payload is not JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise OracleUnavailable(
            f"Suggestion payload must be a list, got {type(payload).__name__}"
        )

    suggestions: list[Suggestion] = []
    for item in payload:
        try:
            parsed = OracleSuggestion.model_validate(item)
        except ValidationError as exc:
            logger.warning("Dropping malformed suggestion: %s", exc.errors()[0]["msg"])
            continue
        if parsed.requestId not in request_ids or parsed.designerId not in designer_ids:
            logger.warning(
                "Dropping suggestion with unknown ids: request=%s, designer=%s",
                parsed.requestId, parsed.designerId,
            )
            continue
        suggestions.append(
            Suggestion(
                request_id=parsed.requestId,
                designer_id=parsed.designerId,
                rationale=parsed.rationale,
            )
        )
    return suggestions


class AdvisoryClient:
    """Async client for the generative-model advisory service."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = settings.ADVISORY_API_KEY if api_key is None else api_key
        self._model = model or settings.ADVISORY_MODEL
        self._base_url = (base_url or settings.ADVISORY_BASE_URL).rstrip("/")
        self._timeout = timeout or settings.ADVISORY_TIMEOUT
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def suggest_assignments(
        self,
        designers: list[Designer],
        pending: list[DesignRequest],
    ) -> list[Suggestion]:
        """Ask for request-to-designer pairings. Failures yield []."""
        if not self.configured:
            logger.info("Advisory oracle not configured; no suggestions")
            return []
        if not designers or not pending:
            return []

        try:
            text = await self._generate(
                build_assignment_prompt(designers, pending),
                response_schema=SUGGESTION_SCHEMA,
            )
            suggestions = parse_suggestions(
                text,
                designer_ids={d.id for d in designers},
                request_ids={r.id for r in pending},
            )
        except OracleUnavailable as exc:
            ORACLE_FAILURES.labels(operation="suggest").inc()
            logger.warning("Advisory suggestions unavailable: %s", exc)
            return []

        logger.info(
            "Advisory suggestions received: count=%d, pending=%d",
            len(suggestions), len(pending),
        )
        return suggestions

    async def summarize(self, period: str, stats: dict[str, Any]) -> str:
        """Ask for a short executive summary. Failures yield a fallback string."""
        if not self.configured:
            return NO_KEY_INSIGHT
        try:
            text = await self._generate(build_insights_prompt(period, stats))
        except OracleUnavailable as exc:
            ORACLE_FAILURES.labels(operation="summarize").inc()
            logger.warning("Advisory summary unavailable: %s", exc)
            return FAILED_INSIGHT
        return text or FAILED_INSIGHT

    # ── Internal ──

    async def _generate(
        self,
        prompt: str,
        response_schema: Optional[dict[str, Any]] = None,
    ) -> str:
        body: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        if response_schema is not None:
            body["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            }

        url = f"{self._base_url}/models/{self._model}:generateContent"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    url,
                    headers={"x-goog-api-key": self._api_key},
                    json=body,
                )
                resp.raise_for_status()
                data = resp.json()
            parts = data["candidates"][0]["content"]["parts"]
            return "".join(p.get("text", "") for p in parts)
        except httpx.HTTPError as exc:
            raise OracleUnavailable(f"Oracle request failed: {exc}") from exc
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as exc:
            raise OracleUnavailable(f"Unexpected oracle response: {exc!r}") from exc
