"""Wire the store, ID generator and presenter into the portal services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.exc import ArgumentError

from examportal import config
from examportal.adapters.db.engine import make_engine
from examportal.adapters.id_generators import RandomBase36IdGenerator
from examportal.adapters.key_value_store import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    SqlAlchemyKeyValueStore,
)
from examportal.adapters.presenters import LoggingPresenter
from examportal.service_layer.registrations import RegistrationManager
from examportal.service_layer.results import ResultManager
from examportal.service_layer.session import SessionManager
from examportal.service_layer.validation import FormValidator

if TYPE_CHECKING:
    from examportal.interfaces.form_source import FormSource
    from examportal.interfaces.id_generator import IdGenerator
    from examportal.interfaces.key_value_store import KeyValueStore
    from examportal.interfaces.presenter import Presenter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application services."""

    store: KeyValueStore
    presenter: Presenter
    session: SessionManager
    results: ResultManager
    registrations: RegistrationManager
    validator: FormValidator


def build_store(url: str, namespace: str = config.DEFAULT_NAMESPACE) -> KeyValueStore:
    """Build the key-value store a store URL refers to.

    Args:
        url: ``memory://``, a ``.json`` path (optionally ``file://``) or a
            SQLAlchemy database URL.
        namespace: Namespace for the SQL backend; ignored by the others.

    Raises:
        UnknownStoreUrlError: If ``url`` matches no backend.
    """
    if url == config.MEMORY_URL:
        return InMemoryKeyValueStore()
    if (path := config.json_store_path(url)) is not None:
        return JsonFileKeyValueStore(path)
    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise config.UnknownStoreUrlError(url) from e
    return SqlAlchemyKeyValueStore(engine, namespace=namespace)


def bootstrap(
    *,
    store: KeyValueStore | None = None,
    presenter: Presenter | None = None,
    id_generator: IdGenerator | None = None,
    form_source: FormSource | None = None,
) -> AppContainer:
    """Assemble the portal services.

    Anything not supplied is built from configuration: the store from
    ``EXAMPORTAL_STORE_URL``/``EXAMPORTAL_STORE_NAMESPACE``, a headless
    ``LoggingPresenter`` and a random base-36 ID generator.
    """
    if store is None:
        store = build_store(config.get_store_url(), config.get_store_namespace())
    presenter = presenter or LoggingPresenter()
    id_generator = id_generator or RandomBase36IdGenerator()
    logger.debug("Bootstrapping with store %r", store)

    return AppContainer(
        store=store,
        presenter=presenter,
        session=SessionManager(store, presenter),
        results=ResultManager(store, id_generator),
        registrations=RegistrationManager(store, id_generator),
        validator=FormValidator(presenter, form_source),
    )
