"""GenerationSession — holds the current spec and serializes generation requests.

Usage::

    session = GenerationSession()
    spec = asyncio.run(session.generate("house", "US"))
    print(session.warnings)

Only the newest request can land: starting a generation cancels any that
is still pending.  A failed generation is logged and the previous spec is
kept untouched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from blueprintgen.config import GENERATION_DELAY_S
from blueprintgen.generation.customizer import Dimension, resize_room, set_room_dimension
from blueprintgen.generation.generator import generate_blueprint
from blueprintgen.layout.engine import LayoutEngine
from blueprintgen.models.blueprint import BlueprintSpec

logger = logging.getLogger(__name__)

Generator = Callable[..., Awaitable[BlueprintSpec]]


class GenerationSession:
    """Current spec, its warnings, and the single in-flight generation.

    Parameters
    ----------
    delay:
        Latency passed to the generator, in seconds.
    generator:
        Coroutine function ``(building_type, country, *, delay)``.
    engine_factory:
        Builds the layout engine for a generated spec.
    """

    def __init__(
        self,
        *,
        delay: float = GENERATION_DELAY_S,
        generator: Generator = generate_blueprint,
        engine_factory: Callable[[BlueprintSpec], LayoutEngine] = LayoutEngine,
        building_type: str = "house",
        country: str = "US",
    ) -> None:
        self.delay = delay
        self._generator = generator
        self._engine_factory = engine_factory
        self.building_type = building_type
        self.country = country
        self.spec: BlueprintSpec | None = None
        self.warnings: list[str] = []
        self._pending: asyncio.Task | None = None

    @property
    def is_generating(self) -> bool:
        return self._pending is not None and not self._pending.done()

    async def generate(
        self,
        building_type: str | None = None,
        country: str | None = None,
    ) -> BlueprintSpec | None:
        """Generate, lay out and validate a new spec.

        Returns the new spec, the previous one when generation failed, or
        ``None`` when a newer request superseded this one.
        """
        building_type = building_type or self.building_type
        country = country or self.country

        if self.is_generating:
            logger.debug("Cancelling pending generation")
            self._pending.cancel()

        task = asyncio.ensure_future(self._run(building_type, country))
        self._pending = task
        try:
            spec, warnings = await task
        except asyncio.CancelledError:
            if self._pending is not task:
                return None
            raise
        except Exception:
            logger.exception("Generation of %s for %s failed", building_type, country)
            return self.spec

        if self._pending is not task:
            # finished before a newer request started, but resumed after it
            logger.debug("Discarding superseded %s generation", building_type)
            return None

        self.spec = spec
        self.warnings = warnings
        self.building_type = building_type
        self.country = country
        return spec

    async def _run(self, building_type: str, country: str) -> tuple[BlueprintSpec, list[str]]:
        initial = await self._generator(building_type, country, delay=self.delay)
        return self._engine_factory(initial).finalize()

    async def reset(self) -> BlueprintSpec | None:
        """Discard manual changes and regenerate from the default tables."""
        return await self.generate(self.building_type, self.country)

    def resize(self, room_id: str, dimension: Dimension, delta: float) -> BlueprintSpec:
        """Apply a +/- resize to the current spec."""
        return self._apply(resize_room(
            self._require_spec(), room_id, dimension, delta,
            engine_factory=self._engine_factory,
        ))

    def set_dimension(self, room_id: str, dimension: Dimension, value: float) -> BlueprintSpec:
        """Apply a slider value to the current spec."""
        return self._apply(set_room_dimension(
            self._require_spec(), room_id, dimension, value,
            engine_factory=self._engine_factory,
        ))

    def _apply(self, spec: BlueprintSpec) -> BlueprintSpec:
        self.spec = spec
        self.warnings = self._engine_factory(spec).validate_layout()
        return spec

    def _require_spec(self) -> BlueprintSpec:
        if self.spec is None:
            raise RuntimeError("No blueprint has been generated yet")
        return self.spec
