"""
Data Service - Fetch lifecycle for global and country-scoped data.

Loads the country list and statistics once, then reloads the four
country-scoped resources every time the selection changes.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..config import Config
from ..fetchers import TourismApiClient
from ..models import Country, FoodItem, Hospital, PhraseEntry, Place
from ..state import AppContext

logger = logging.getLogger(__name__)

# Country-scoped resources, in request order
SCOPED_RESOURCES = ("places", "food", "hospitals", "phrases")


@dataclass
class CountryBundle:
    """
    Outcome of one country-scoped batch.

    A resource that failed is left as None and its exception is
    recorded in ``errors``.
    """

    code: str
    generation: int = 0
    places: Optional[List[Place]] = None
    food: Optional[List[FoodItem]] = None
    hospitals: Optional[List[Hospital]] = None
    phrases: Optional[List[PhraseEntry]] = None
    errors: Dict[str, BaseException] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class DataLoadController:
    """
    Owns the fetch lifecycle and the loading flag.

    Usage:
        controller = DataLoadController(context, TourismApiClient())
        await controller.start()
        controller.select_country("GE")
    """

    def __init__(self, context: AppContext, client: TourismApiClient) -> None:
        """
        Initialize the controller.

        Args:
            context: Shared application state
            client: Provider client (anything with the TourismApiClient methods)
        """
        self.context = context
        self.client = client
        self._initial_started: bool = False
        # Bumped on every selection change
        self._generation: int = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self):
        return self.context.load

    # =========================================================================
    # STARTUP
    # =========================================================================

    async def start(self, default_code: Optional[str] = None) -> None:
        """Select the default country and load the global data."""
        code = Config.DEFAULT_COUNTRY if default_code is None else default_code
        self.select_country(code)
        await self.load_initial()

    async def load_initial(self) -> None:
        """
        Load countries and statistics concurrently.

        Runs once per controller; later calls return immediately.
        A failure leaves the affected list as it was.
        """
        if self._initial_started:
            logger.debug("Initial data already requested, skipping")
            return
        self._initial_started = True

        countries, statistics = await asyncio.gather(
            self.client.get_countries(),
            self.client.get_statistics(),
            return_exceptions=True,
        )

        if isinstance(countries, BaseException):
            logger.error("Error fetching countries: %s", countries)
        else:
            self.state.countries = list(countries)

        if isinstance(statistics, BaseException):
            logger.error("Error fetching statistics: %s", statistics)
        else:
            self.state.statistics = list(statistics)

        logger.info(
            "Initial data: %d countries, %d statistics",
            len(self.state.countries),
            len(self.state.statistics),
        )
        self.context.notify("load")

    # =========================================================================
    # COUNTRY SELECTION
    # =========================================================================

    def select_country(self, code: str) -> Optional[asyncio.Task]:
        """
        Change the selected country and start loading its data.

        Must be called from the running event loop.

        Args:
            code: Short country identifier

        Returns:
            The batch task, or None when nothing was started
            (same code as before, or an empty code)
        """
        code = (code or "").strip()
        if code == self.state.selected_country_code:
            return None

        self.state.selected_country_code = code
        self._generation += 1
        # Any batch still in flight is stale from here on
        self.state.is_loading = bool(code)
        self.context.notify("load")

        if not code:
            return None

        task = asyncio.get_running_loop().create_task(self.load_country(code, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def selected_country(self) -> Optional[Country]:
        """Get the Country record for the current selection, if loaded."""
        code = self.state.selected_country_code
        for country in self.state.countries:
            if country.code == code:
                return country
        return None

    async def load_country(self, code: str, generation: Optional[int] = None) -> bool:
        """
        Run one country-scoped batch and commit it if still current.

        Args:
            code: Country the batch is for
            generation: Selection the batch belongs to (defaults to the
                current one); a later selection makes the batch stale,
                even one that picks the same code again

        Returns:
            True if the results were applied to the state
        """
        if generation is None:
            generation = self._generation
        if not self._is_current(code, generation):
            logger.debug("Not loading %r: not the current selection", code)
            return False

        self.state.is_loading = True
        self.context.notify("load")

        bundle = await self.fetch_country_bundle(code)
        bundle.generation = generation
        return self._commit(bundle)

    async def fetch_country_bundle(self, code: str) -> CountryBundle:
        """Request places, food, hospitals and phrases for code concurrently."""
        results = await asyncio.gather(
            self.client.get_places(code),
            self.client.get_food(code),
            self.client.get_hospitals(code),
            self.client.get_phrases(code),
            return_exceptions=True,
        )

        bundle = CountryBundle(code=code)
        for name, result in zip(SCOPED_RESOURCES, results):
            if isinstance(result, BaseException):
                logger.error("Error fetching %s for %s: %s", name, code, result)
                bundle.errors[name] = result
            else:
                setattr(bundle, name, list(result))
        return bundle

    def _is_current(self, code: str, generation: int) -> bool:
        return bool(code) and code == self.state.selected_country_code and generation == self._generation

    def _commit(self, bundle: CountryBundle) -> bool:
        if not self._is_current(bundle.code, bundle.generation):
            # A newer selection owns the state and the loading flag
            logger.info(
                "Discarding stale data for %s (selected: %s)",
                bundle.code,
                self.state.selected_country_code or "-",
            )
            return False

        for name in SCOPED_RESOURCES:
            value = getattr(bundle, name)
            if value is not None:
                setattr(self.state, name, value)
        self.state.is_loading = False

        if bundle.ok:
            logger.info(
                "Loaded %s: %d places, %d food, %d hospitals, %d phrases",
                bundle.code,
                len(self.state.places),
                len(self.state.food),
                len(self.state.hospitals),
                len(self.state.phrases),
            )
        else:
            logger.warning("Partial data for %s, failed: %s", bundle.code, ", ".join(bundle.errors))

        self.context.notify("load")
        return True

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def wait_idle(self) -> None:
        """Wait for every batch started by select_country()."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Cancel pending batches and close the provider client."""
        for task in list(self._tasks):
            task.cancel()
        await self.wait_idle()
        await self.client.close()

    async def __aenter__(self) -> "DataLoadController":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
