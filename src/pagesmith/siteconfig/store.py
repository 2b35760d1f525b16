"""ConfigStore: current value of every global configuration domain."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from pagesmith.errors import NotFound, PersistenceError, ValidationFailed
from pagesmith.siteconfig.defaults import default_for
from pagesmith.siteconfig.models import DOMAIN_MODELS, ConfigDomain, DomainValue
from pagesmith.storage.adapter import Category, PersistenceAdapter

logger = logging.getLogger(__name__)

OnSave = Callable[[ConfigDomain, DomainValue], None]


def _domain(domain: ConfigDomain | str) -> ConfigDomain:
    try:
        return ConfigDomain(domain)
    except ValueError:
        raise ValidationFailed(f"unknown config domain: {domain}") from None


def coerce_value(domain: ConfigDomain | str, value: DomainValue | Mapping[str, Any]) -> DomainValue:
    """Return ``value`` as the model of ``domain``.

    Accepts a model instance or a document-shaped mapping. Raises
    ValidationFailed for anything else.
    """
    domain = _domain(domain)
    model = DOMAIN_MODELS[domain]
    if isinstance(value, model):
        return value
    if isinstance(value, Mapping):
        try:
            return model.model_validate(dict(value))
        except ValidationError as exc:
            raise ValidationFailed(
                [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
            ) from exc
    raise ValidationFailed(f"{domain} expects {model.__name__}, got {type(value).__name__}")


class ConfigStore:
    """Holds one immutable value per domain and notifies subscribers on save.

    Domains that were never set report their compiled-in default.
    """

    def __init__(
        self, initial: Mapping[ConfigDomain | str, DomainValue | Mapping[str, Any]] | None = None
    ) -> None:
        self._values: dict[ConfigDomain, DomainValue] = {}
        self._listeners: list[OnSave] = []
        for domain, value in (initial or {}).items():
            self._values[_domain(domain)] = coerce_value(domain, value)

    @classmethod
    def from_adapter(cls, adapter: PersistenceAdapter) -> ConfigStore:
        """Load every saved domain document and persist future saves to ``adapter``.

        A missing document means the domain keeps its default. Unreadable
        documents are logged and also fall back to the default.
        """
        values: dict[ConfigDomain, DomainValue] = {}
        for domain in ConfigDomain:
            try:
                document = adapter.load(Category.CONFIG, domain.value)
            except NotFound:
                continue
            except PersistenceError as exc:
                logger.warning("Using default %s config: %s", domain, exc)
                continue
            try:
                values[domain] = coerce_value(domain, document)
            except ValidationFailed as exc:
                logger.warning("Using default %s config, stored document is invalid: %s", domain, exc)
        logger.info("Loaded %d saved config domains", len(values))
        store = cls(values)
        store.persist_to(adapter)
        return store

    # ── Subscribers ──────────────────────────────────────────────

    def subscribe(self, listener: OnSave) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: OnSave) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def persist_to(self, adapter: PersistenceAdapter) -> OnSave:
        """Subscribe a listener that writes each saved domain to ``adapter``."""

        def _write(domain: ConfigDomain, value: DomainValue) -> None:
            adapter.save(Category.CONFIG, domain.value, value.to_document())
            logger.info("Saved %s config", domain)

        self.subscribe(_write)
        return _write

    def _notify(self, domain: ConfigDomain, value: DomainValue) -> None:
        for listener in list(self._listeners):
            listener(domain, value)

    # ── Domain operations ────────────────────────────────────────

    def get(self, domain: ConfigDomain | str) -> DomainValue:
        domain = _domain(domain)
        return self._values.get(domain, default_for(domain))

    def default(self, domain: ConfigDomain | str) -> DomainValue:
        return default_for(_domain(domain))

    def is_default(self, domain: ConfigDomain | str) -> bool:
        return self.get(domain) == self.default(domain)

    def set(self, domain: ConfigDomain | str, value: DomainValue | Mapping[str, Any]) -> DomainValue:
        """Replace a domain's value and push it to every subscriber.

        If a subscriber raises PersistenceError the previous value is put
        back before the error propagates.
        """
        domain = _domain(domain)
        new_value = coerce_value(domain, value)
        previous = self._values.get(domain)
        self._values[domain] = new_value
        try:
            self._notify(domain, new_value)
        except PersistenceError:
            if previous is None:
                del self._values[domain]
            else:
                self._values[domain] = previous
            raise
        return new_value

    def save(self, domain: ConfigDomain | str) -> DomainValue:
        """Push the current value of ``domain`` to subscribers unchanged."""
        domain = _domain(domain)
        value = self.get(domain)
        self._notify(domain, value)
        return value

    def reset(self, domain: ConfigDomain | str) -> DomainValue:
        """Discard edits and return to the compiled-in default.

        Subscribers are not notified; call ``save`` to persist the reset.
        """
        domain = _domain(domain)
        self._values[domain] = default_for(domain)
        return self._values[domain]

    def snapshot(self) -> dict[ConfigDomain, DomainValue]:
        return {domain: self.get(domain) for domain in ConfigDomain}
