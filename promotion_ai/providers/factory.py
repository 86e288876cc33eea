"""Factory for creating text provider instances."""

import logging
from typing import Dict, List, Tuple, Type

from promotion_ai.config.providers import ProviderDescriptor
from promotion_ai.config.settings import Settings
from promotion_ai.exceptions import ConfigurationError

from .base import BaseTextProvider

logger = logging.getLogger(__name__)


class ProviderFactory:
    """Factory for creating text provider instances.

    Adapters are registered by wire format ("kind"), with aliases for the
    provider names that share a wire format.

    Example:
        >>> from promotion_ai.providers import ProviderFactory
        >>> providers = ProviderFactory.from_settings(Settings())
        >>> [p.name for p in providers]
        ['openrouter', 'openai', 'groq', 'anthropic']
    """

    _registry: Dict[str, Type[BaseTextProvider]] = {}
    _aliases: Dict[str, str] = {}
    _initialized: bool = False

    @classmethod
    def register(cls, kind: str, provider_class: Type[BaseTextProvider]) -> None:
        """Register a provider class.

        Args:
            kind: The canonical wire-format name for the adapter.
            provider_class: The provider class to register.
        """
        cls._registry[kind.lower()] = provider_class
        logger.debug(f"Registered provider kind: {kind}")

    @classmethod
    def register_alias(cls, alias: str, canonical_kind: str) -> None:
        """Register an alias for a provider kind."""
        cls._aliases[alias.lower()] = canonical_kind.lower()
        logger.debug(f"Registered alias: {alias} -> {canonical_kind}")

    @classmethod
    def _resolve_kind(cls, kind: str) -> str:
        kind_lower = kind.lower()
        return cls._aliases.get(kind_lower, kind_lower)

    @classmethod
    def get_provider_class(cls, kind: str) -> Type[BaseTextProvider]:
        """Get the provider class without instantiating.

        Raises:
            ConfigurationError: If the kind is not found in the registry.
        """
        cls._ensure_initialized()

        resolved = cls._resolve_kind(kind)
        if resolved not in cls._registry:
            raise ConfigurationError(
                f"Unknown provider kind: '{kind}'. "
                f"Available kinds: {cls.list_kinds()}"
            )
        return cls._registry[resolved]

    @classmethod
    def create(cls, descriptor: ProviderDescriptor) -> BaseTextProvider:
        """Create the adapter for one descriptor.

        Args:
            descriptor: Provider connection details.

        Returns:
            An adapter instance bound to the descriptor.

        Raises:
            ConfigurationError: If the descriptor's kind is not registered.
        """
        provider_class = cls.get_provider_class(descriptor.kind)
        return provider_class(descriptor)

    @classmethod
    def from_settings(cls, settings: Settings) -> Tuple[BaseTextProvider, ...]:
        """Create one adapter per configured provider, in declaration order."""
        providers = tuple(cls.create(d) for d in settings.provider_descriptors())
        configured = [p.name for p in providers if p.has_credential]
        logger.info(f"Providers with credentials: {configured or 'none'}")
        return providers

    @classmethod
    def list_kinds(cls) -> List[str]:
        """List all registered canonical kinds (not aliases)."""
        cls._ensure_initialized()
        return sorted(cls._registry.keys())

    @classmethod
    def list_aliases(cls) -> Dict[str, str]:
        cls._ensure_initialized()
        return dict(cls._aliases)

    @classmethod
    def _ensure_initialized(cls) -> None:
        """Ensure adapters are registered on first use."""
        if not cls._initialized:
            cls._auto_register_providers()
            cls._initialized = True

    @classmethod
    def _auto_register_providers(cls) -> None:
        """Auto-register all known adapters, skipping any whose SDK is missing."""
        provider_configs = [
            ("openai", "openai_provider", "OpenAICompatibleProvider", ["openrouter", "groq", "gpt"]),
            ("anthropic", "anthropic_provider", "AnthropicProvider", ["claude"]),
        ]

        for canonical_kind, module_name, class_name, aliases in provider_configs:
            cls._try_register_provider(canonical_kind, module_name, class_name, aliases)

    @classmethod
    def _try_register_provider(
        cls,
        canonical_kind: str,
        module_name: str,
        class_name: str,
        aliases: List[str],
    ) -> None:
        try:
            import importlib
            module = importlib.import_module(f".{module_name}", package="promotion_ai.providers")
            provider_class = getattr(module, class_name)

            cls.register(canonical_kind, provider_class)

            for alias in aliases:
                cls.register_alias(alias, canonical_kind)

        except ImportError as e:
            logger.debug(
                f"Provider kind '{canonical_kind}' not available: {e}. "
                "Install the required SDK to enable this provider."
            )
