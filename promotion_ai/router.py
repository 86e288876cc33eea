"""
ProviderRouter - resolves a generation request to exactly one result.

Candidate order: pinned preferred provider, or the configured priority list
filtered to providers with a credential. Candidates are tried one at a time;
the first non-empty completion wins, and exhaustion degrades to a local,
network-free fallback text.
"""
import asyncio
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .exceptions import MissingPromptError, PreferredProviderError, ProviderError
from .models import (
    FALLBACK_PROVIDER,
    AttemptRecord,
    GenerationRequest,
    GenerationResult,
    PromptSpec,
    ProviderStatus,
)
from .providers import BaseTextProvider
from .templates import build_prompt, fallback_text


class ProviderRouter:
    """
    Ordered multi-provider router with a deterministic local fallback.

    The router holds no mutable state after construction, so one instance is
    shared by all concurrent requests.
    """

    def __init__(
        self,
        providers: Iterable[BaseTextProvider],
        priority: Optional[Sequence[str]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the router.

        Args:
            providers: One adapter per configured provider.
            priority: Provider names in the order they should be tried.
                      Defaults to the order of ``providers``. Unknown names
                      are ignored.
            logger: Optional logger for routing decisions.
        """
        self.logger = logger or logging.getLogger(__name__)
        self._providers: Dict[str, BaseTextProvider] = {}
        for provider in providers:
            self._providers[provider.name.lower()] = provider

        names = [n.lower() for n in priority] if priority is not None else list(self._providers)
        unknown = [n for n in names if n not in self._providers]
        if unknown:
            self.logger.warning(f"Ignoring unknown providers in priority order: {unknown}")
        self._priority: List[str] = []
        for name in names:
            if name in self._providers and name not in self._priority:
                self._priority.append(name)

    @property
    def priority(self) -> List[str]:
        return list(self._priority)

    @property
    def providers(self) -> List[BaseTextProvider]:
        return list(self._providers.values())

    def get(self, name: str) -> Optional[BaseTextProvider]:
        return self._providers.get(name.strip().lower())

    def candidates(self, preferred_provider: Optional[str] = None) -> List[BaseTextProvider]:
        """
        Determine the candidate order for one request.

        A preferred provider that is configured with a credential is the only
        candidate. Anything else falls through to the priority order, keeping
        only providers that have a credential.
        """
        if preferred_provider:
            provider = self.get(preferred_provider)
            if provider is not None and provider.has_credential:
                return [provider]
            self.logger.warning(
                f"Preferred provider '{preferred_provider}' is not configured; "
                "using priority order"
            )
        return [
            self._providers[name]
            for name in self._priority
            if self._providers[name].has_credential
        ]

    async def route(self, request: GenerationRequest) -> GenerationResult:
        """
        Route a request to the first provider that answers.

        Args:
            request: The user's prompt, style hints and optional pinned provider.

        Returns:
            GenerationResult naming the provider used, or ``"fallback"``.

        Raises:
            MissingPromptError: If the request text is empty. No provider is called.
            PreferredProviderError: If a pinned provider fails.
        """
        text = (request.text or "").strip()
        if not text:
            raise MissingPromptError()

        prompt = build_prompt(text, request.style)
        candidates = self.candidates(request.preferred_provider)
        preferred = self.get(request.preferred_provider) if request.preferred_provider else None
        pinned = preferred is not None and candidates == [preferred]

        attempt_log: List[AttemptRecord] = []
        for provider in candidates:
            try:
                body = await self._attempt(provider, prompt)
            except ProviderError as e:
                self.logger.warning(f"Provider '{provider.name}' failed: {e.message}")
                if pinned:
                    raise PreferredProviderError(provider.name, e.message) from e
                attempt_log.append(AttemptRecord(provider=provider.name, error=e.message))
                continue

            self.logger.info(
                f"Provider '{provider.name}' answered after {len(attempt_log)} failed attempts"
            )
            return GenerationResult(body=body, provider_used=provider.name, attempt_log=attempt_log)

        if candidates:
            self.logger.warning("All providers failed; using local fallback")
        else:
            self.logger.warning("No provider credentials configured; using local fallback")

        return GenerationResult(
            body=fallback_text(text, request.style.template),
            provider_used=FALLBACK_PROVIDER,
            attempt_log=attempt_log,
        )

    async def _attempt(self, provider: BaseTextProvider, prompt: PromptSpec) -> str:
        """Call one provider under its own timeout; every failure becomes ProviderError."""
        timeout = provider.timeout_seconds
        try:
            body = await asyncio.wait_for(provider.attempt(prompt, timeout), timeout=timeout)
        except ProviderError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(provider.name, f"timed out after {timeout:g}s") from e
        except Exception as e:
            # Adapter bugs and unexpected transport errors count as that provider's failure
            raise ProviderError(provider.name, f"{type(e).__name__}: {e}") from e

        if not body or not body.strip():
            raise ProviderError(provider.name, "empty response body")
        return body.strip()

    async def status(self) -> Dict[str, ProviderStatus]:
        """
        Probe every configured provider.

        Providers without a credential are reported without a network call.
        Probes run concurrently, each bounded by its provider's timeout.
        """
        async def check(provider: BaseTextProvider) -> ProviderStatus:
            if not provider.has_credential:
                return ProviderStatus(reachable=False, detail="missing credential")
            timeout = provider.timeout_seconds
            try:
                detail = await asyncio.wait_for(provider.probe(timeout), timeout=timeout)
            except asyncio.TimeoutError:
                return ProviderStatus(reachable=False, detail=f"timed out after {timeout:g}s")
            except ProviderError as e:
                return ProviderStatus(reachable=False, detail=e.message)
            except Exception as e:
                return ProviderStatus(reachable=False, detail=f"{type(e).__name__}: {e}")
            return ProviderStatus(reachable=True, detail=detail)

        providers = self.providers
        results = await asyncio.gather(*(check(p) for p in providers))
        return {p.name: result for p, result in zip(providers, results)}
