"""Request controller for a single image generation.

:class:`RequestController` owns one generation request end to end: it builds
the predict payload, POSTs it under the :class:`~profilegen.core.retry.RetryPolicy`,
extracts the base64 image from the first prediction and decodes it.

``generate`` never raises. Every failure is logged and returned as a
:class:`~profilegen.core.outcome.Failure` carrying the generic user-facing
message from configuration.

Usage Example
-------------
    from profilegen.core.controller import RequestController
    from profilegen.core.styles import get_style_prompt

    controller = RequestController()
    outcome = await controller.generate(get_style_prompt("minimal"))
    if outcome.ok:
        data = outcome.image_bytes
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from .config import ProfilegenConfig, config
from .outcome import (
    Failure,
    FailureKind,
    GenerationError,
    GenerationOutcome,
    MalformedResponseError,
    Success,
    TransportExhaustedError,
)
from .retry import RetryPolicy
from .styles import GenerationRequest

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {"Content-Type": "application/json"}

SleepFunc = Callable[[float], Awaitable[Any]]


def extract_image_bytes(body: Any) -> bytes:
    """Pull the decoded image out of a predict response body.

    Args:
        body: Parsed JSON response

    Returns:
        Raw bytes of ``predictions[0].bytesBase64Encoded``

    Raises:
        MalformedResponseError: If the field is missing, empty or not valid base64
    """
    predictions = body.get("predictions") if isinstance(body, dict) else None
    if not isinstance(predictions, list) or not predictions:
        raise MalformedResponseError("Response contains no predictions")

    first = predictions[0]
    encoded = first.get("bytesBase64Encoded") if isinstance(first, dict) else None
    if not isinstance(encoded, str) or not encoded:
        raise MalformedResponseError("Image data not found in the response")

    try:
        return base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise MalformedResponseError(f"Image data is not valid base64: {e}") from e


class RequestController:
    """Runs one image generation request to a terminal outcome.

    Args:
        cfg: Configuration (global ``config`` if None)
        retry_policy: Backoff policy (built from ``cfg`` if None)
        transport: Optional custom httpx transport (useful for testing)
        sleep: Coroutine used to wait between attempts
        rng: Random source for backoff jitter
    """

    def __init__(
        self,
        cfg: ProfilegenConfig | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.config = cfg or config
        self.retry_policy = retry_policy or RetryPolicy.from_config(self.config)
        self._transport = transport
        self._sleep = sleep
        self._rng = rng

        if not self.config.api_key:
            logger.warning("PROFILEGEN_API_KEY is not set; requests will be sent without a key")

    async def generate(self, prompt: str) -> GenerationOutcome:
        """Generate one image for ``prompt``.

        Args:
            prompt: Text prompt for image generation

        Returns:
            ``Success`` with the decoded PNG bytes, or ``Failure``
        """
        try:
            request = GenerationRequest(prompt=prompt)
            logger.info(f"Requesting image from {self.config.endpoint_url}")
            body = await self._post_with_retry(request.to_payload(self.config.sample_count))
            image_bytes = extract_image_bytes(body)

        except GenerationError as e:
            logger.error(f"Image generation failed ({e.kind.value}): {e}")
            return Failure(kind=e.kind, reason=self.config.failure_message)

        except Exception as e:
            logger.error(f"Unexpected error generating image: {e}", exc_info=True)
            return Failure(kind=FailureKind.UNKNOWN, reason=self.config.failure_message)

        logger.info(f"Image generated ({len(image_bytes)} bytes)")
        return Success(image_bytes=image_bytes)

    async def _post_with_retry(self, payload: dict[str, Any]) -> Any:
        """POST the payload until a 2xx response arrives or attempts run out.

        Returns:
            Parsed JSON body of the successful response

        Raises:
            TransportExhaustedError: If every attempt failed
            MalformedResponseError: If the successful response is not JSON
        """
        policy = self.retry_policy
        params = {"key": self.config.api_key} if self.config.api_key else None
        last_cause = "no attempts made"

        async with httpx.AsyncClient(
            timeout=self.config.request_timeout, transport=self._transport
        ) as client:
            for attempt in range(policy.max_attempts):
                try:
                    response = await client.post(
                        self.config.endpoint_url,
                        params=params,
                        headers=REQUEST_HEADERS,
                        json=payload,
                    )
                except httpx.RequestError as e:
                    last_cause = f"{type(e).__name__}: {e}"
                else:
                    if response.is_success:
                        try:
                            return response.json()
                        except ValueError as e:
                            raise MalformedResponseError(
                                f"Response body is not valid JSON: {e}"
                            ) from e
                    last_cause = f"status {response.status_code}"

                logger.warning(
                    f"Attempt {attempt + 1}/{policy.max_attempts} failed with {last_cause}"
                )
                if policy.has_attempt_after(attempt):
                    delay = policy.compute_delay(attempt, self._rng)
                    logger.debug(f"Retrying in {delay:.2f}s")
                    await self._sleep(delay)

        raise TransportExhaustedError(policy.max_attempts, last_cause)
