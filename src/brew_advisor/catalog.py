"""Fixed catalog of coffee beans and brewing machines."""

from __future__ import annotations

from collections.abc import Iterable

from brew_advisor.exceptions import NotFoundError
from brew_advisor.schema import BrewingMachine, CoffeeBean

BEANS: tuple[CoffeeBean, ...] = (
    CoffeeBean(
        id="1",
        brand="Dark Roast",
        origin="Australian",
        roast_level="dark",
        flavor_profile=("bold", "smoky", "rich"),
    ),
    CoffeeBean(
        id="2",
        brand="Medium Roast",
        origin="Australian",
        roast_level="medium",
        flavor_profile=("balanced", "smooth", "caramel"),
    ),
    CoffeeBean(
        id="3",
        brand="Illy",
        origin="Brazil",
        roast_level="medium",
        flavor_profile=("smooth", "nutty", "classic"),
    ),
    CoffeeBean(
        id="4",
        brand="Illy",
        origin="Guatemala",
        roast_level="dark",
        flavor_profile=("rich", "chocolatey", "full-bodied"),
    ),
)

MACHINES: tuple[BrewingMachine, ...] = (
    BrewingMachine(id="1", type="pour-over", brand="Hario", model="V60"),
    BrewingMachine(id="2", type="french-press", brand="Bodum", model="Chambord"),
    BrewingMachine(id="3", type="espresso", brand="Breville/Sage", model="Barista Express"),
    BrewingMachine(id="4", type="espresso", brand="Breville/Sage", model="Barista Pro"),
    BrewingMachine(id="5", type="espresso", brand="De'Longhi", model="La Specialista"),
    BrewingMachine(id="6", type="full-automatic", brand="Jura", model="E8"),
    BrewingMachine(id="7", type="full-automatic", brand="Saeco", model="PicoBaristo"),
    BrewingMachine(id="8", type="espresso", brand="Gaggia", model="Classic Pro"),
    BrewingMachine(id="9", type="aeropress", brand="AeroPress", model="Original"),
)


class Catalog:
    """Read-only lookup over a small, fixed set of beans and machines."""

    def __init__(self, beans: Iterable[CoffeeBean] = BEANS, machines: Iterable[BrewingMachine] = MACHINES):
        self._beans = tuple(beans)
        self._machines = tuple(machines)

    @property
    def beans(self) -> tuple[CoffeeBean, ...]:
        return self._beans

    @property
    def machines(self) -> tuple[BrewingMachine, ...]:
        return self._machines

    def find_bean(self, bean_id: str) -> CoffeeBean | None:
        for bean in self._beans:
            if bean.id == bean_id:
                return bean
        return None

    def find_machine(self, machine_id: str) -> BrewingMachine | None:
        for machine in self._machines:
            if machine.id == machine_id:
                return machine
        return None

    def get_bean(self, bean_id: str) -> CoffeeBean:
        """Return the bean with `bean_id`.

        Raises:
            NotFoundError: If no bean has that id.
        """
        bean = self.find_bean(bean_id)
        if bean is None:
            raise NotFoundError(f"Unknown bean id: {bean_id!r}")
        return bean

    def get_machine(self, machine_id: str) -> BrewingMachine:
        """Return the machine with `machine_id`.

        Raises:
            NotFoundError: If no machine has that id.
        """
        machine = self.find_machine(machine_id)
        if machine is None:
            raise NotFoundError(f"Unknown machine id: {machine_id!r}")
        return machine


DEFAULT_CATALOG = Catalog()
