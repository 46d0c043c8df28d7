"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .clusters import IClusterRegistry, StaticClusterRegistry
from .config import Settings
from .logging_config import get_logger
from .resolver import CompletenessRefetcher, ITraceResolver, TraceLocator, TraceResolver
from .store import InMemoryTraceStore, ITraceStore, JaegerQueryStore
from .tracker import Clock, IRequestTracker, RequestTracker, utc_now

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    @property
    def settings(self) -> Settings: ...

    @property
    def resolver(self) -> ITraceResolver: ...

    @property
    def tracker(self) -> IRequestTracker: ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        store: ITraceStore | None = None,
        registry: IClusterRegistry | None = None,
        clock: Clock = utc_now,
    ):
        self._settings = settings or Settings.from_env()
        self._clock = clock

        # Injected collaborators take precedence over settings
        self._store: ITraceStore | None = store
        self._registry: IClusterRegistry | None = registry
        self._tracker: RequestTracker | None = None
        self._resolver: TraceResolver | None = None

    def _build_store(self) -> ITraceStore:
        if self._settings.jaeger_query_url:
            logger.info("Using Jaeger query store at %s", self._settings.jaeger_query_url)
            return JaegerQueryStore(
                self._settings.jaeger_query_url,
                timeout=self._settings.jaeger_timeout_seconds,
            )
        if self._settings.fixture_file:
            return InMemoryTraceStore.from_file(self._settings.fixture_file)
        logger.warning("No JAEGER_QUERY_URL configured, using an empty in-memory store")
        return InMemoryTraceStore()

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Store and registry (no dependencies)
        if self._store is None:
            self._store = self._build_store()
        if self._registry is None:
            self._registry = StaticClusterRegistry(self._settings.clusters)
        logger.info("Known clusters: %s", self._registry.list_clusters())

        # 2. Tracker
        self._tracker = RequestTracker(clock=self._clock)

        # 3. Resolver pipeline (depends on store and registry)
        locator = TraceLocator(
            store=self._store,
            registry=self._registry,
            service_name=self._settings.service_name,
            query_limit=self._settings.query_limit,
        )
        self._resolver = TraceResolver(locator, CompletenessRefetcher(self._store))
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._store:
            await self._store.close()
            logger.info("Store closed")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def resolver(self) -> ITraceResolver:
        """Get resolver instance."""
        if not self._resolver:
            raise RuntimeError("Application not started")
        return self._resolver

    @property
    def tracker(self) -> IRequestTracker:
        """Get tracker instance."""
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker
