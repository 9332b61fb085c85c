"""
Modelo de dominio: Totales acumulados de un nivel de la remesa.

Cada nivel (documento, acreedor, fecha de cobro) lleva tres contadores:

- importe: suma de los adeudos, en céntimos enteros.
- adeudos: número de registros 03 del nivel.
- registros: número de registros de CUALQUIER tipo que aportan al nivel,
  incluido su propio registro de totales.

Mientras el nivel está abierto, `amount` es el importe calculado. Al
cerrarse, el validador guarda el importe DECLARADO en el fichero
(`declared_amount`) y a partir de ahí ese es el valor que se expone.
"""

from dataclasses import FrozenInstanceError, dataclass
from decimal import Decimal

from remesas.domain.shared.money import cents_to_decimal


class Freezable:
    """Mixin que permite fijar un objeto mutable.

    Tras `freeze()` cualquier asignación de atributo lanza
    FrozenInstanceError, igual que en una dataclass frozen=True.
    """

    _frozen: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if self._frozen:
            raise FrozenInstanceError(f"No se puede modificar '{name}': el nivel ya cuadró")
        super().__setattr__(name, value)

    def freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)


@dataclass
class LevelTotals(Freezable):
    """Contadores mutables de un nivel. Solo los modifica el agregador y
    el validador durante el parseo."""

    cents: int = 0
    debit_count: int = 0
    register_count: int = 0
    declared_amount: Decimal | None = None

    @property
    def computed_amount(self) -> Decimal:
        """Importe calculado a partir de los adeudos sumados."""
        return cents_to_decimal(self.cents)

    @property
    def amount(self) -> Decimal:
        """Importe declarado si el nivel ya cuadró; si no, el calculado."""
        if self.declared_amount is not None:
            return self.declared_amount
        return self.computed_amount


class AggregatedLevel(Freezable):
    """Mixin para los niveles con totales.

    Las subclases son dataclasses que declaran los campos `totals` y
    `closed`. Expone los totales con los nombres del contrato de lectura.
    """

    totals: LevelTotals
    closed: bool

    @property
    def total_amount(self) -> Decimal:
        return self.totals.amount

    @property
    def debit_register_count(self) -> int:
        return self.totals.debit_count

    @property
    def total_register_count(self) -> int:
        return self.totals.register_count
