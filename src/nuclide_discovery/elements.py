"""
Element catalog: the 118 IUPAC elements and their cells on a 9x18 display grid.

Rows 1-7 are the ordinary periods. Row 8 holds the lanthanides (57-71) and
row 9 the actinides (89-103), both shifted to start at group 3.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

import numpy as np


GRID_ROWS = 9
GRID_COLUMNS = 18


@dataclass(frozen=True)
class ElementDef:
    Z: int
    symbol: str
    name: str
    period: int  # строка сетки (1..9)
    group: int  # столбец сетки (1..18)


ALL_ELEMENTS: Tuple[ElementDef, ...] = (
    # --- period 1 ---
    ElementDef(1, "H", "Hydrogen", 1, 1),
    ElementDef(2, "He", "Helium", 1, 18),
    # --- period 2 ---
    ElementDef(3, "Li", "Lithium", 2, 1),
    ElementDef(4, "Be", "Beryllium", 2, 2),
    ElementDef(5, "B", "Boron", 2, 13),
    ElementDef(6, "C", "Carbon", 2, 14),
    ElementDef(7, "N", "Nitrogen", 2, 15),
    ElementDef(8, "O", "Oxygen", 2, 16),
    ElementDef(9, "F", "Fluorine", 2, 17),
    ElementDef(10, "Ne", "Neon", 2, 18),
    # --- period 3 ---
    ElementDef(11, "Na", "Sodium", 3, 1),
    ElementDef(12, "Mg", "Magnesium", 3, 2),
    ElementDef(13, "Al", "Aluminium", 3, 13),
    ElementDef(14, "Si", "Silicon", 3, 14),
    ElementDef(15, "P", "Phosphorus", 3, 15),
    ElementDef(16, "S", "Sulfur", 3, 16),
    ElementDef(17, "Cl", "Chlorine", 3, 17),
    ElementDef(18, "Ar", "Argon", 3, 18),
    # --- period 4 ---
    ElementDef(19, "K", "Potassium", 4, 1),
    ElementDef(20, "Ca", "Calcium", 4, 2),
    ElementDef(21, "Sc", "Scandium", 4, 3),
    ElementDef(22, "Ti", "Titanium", 4, 4),
    ElementDef(23, "V", "Vanadium", 4, 5),
    ElementDef(24, "Cr", "Chromium", 4, 6),
    ElementDef(25, "Mn", "Manganese", 4, 7),
    ElementDef(26, "Fe", "Iron", 4, 8),
    ElementDef(27, "Co", "Cobalt", 4, 9),
    ElementDef(28, "Ni", "Nickel", 4, 10),
    ElementDef(29, "Cu", "Copper", 4, 11),
    ElementDef(30, "Zn", "Zinc", 4, 12),
    ElementDef(31, "Ga", "Gallium", 4, 13),
    ElementDef(32, "Ge", "Germanium", 4, 14),
    ElementDef(33, "As", "Arsenic", 4, 15),
    ElementDef(34, "Se", "Selenium", 4, 16),
    ElementDef(35, "Br", "Bromine", 4, 17),
    ElementDef(36, "Kr", "Krypton", 4, 18),
    # --- period 5 ---
    ElementDef(37, "Rb", "Rubidium", 5, 1),
    ElementDef(38, "Sr", "Strontium", 5, 2),
    ElementDef(39, "Y", "Yttrium", 5, 3),
    ElementDef(40, "Zr", "Zirconium", 5, 4),
    ElementDef(41, "Nb", "Niobium", 5, 5),
    ElementDef(42, "Mo", "Molybdenum", 5, 6),
    ElementDef(43, "Tc", "Technetium", 5, 7),
    ElementDef(44, "Ru", "Ruthenium", 5, 8),
    ElementDef(45, "Rh", "Rhodium", 5, 9),
    ElementDef(46, "Pd", "Palladium", 5, 10),
    ElementDef(47, "Ag", "Silver", 5, 11),
    ElementDef(48, "Cd", "Cadmium", 5, 12),
    ElementDef(49, "In", "Indium", 5, 13),
    ElementDef(50, "Sn", "Tin", 5, 14),
    ElementDef(51, "Sb", "Antimony", 5, 15),
    ElementDef(52, "Te", "Tellurium", 5, 16),
    ElementDef(53, "I", "Iodine", 5, 17),
    ElementDef(54, "Xe", "Xenon", 5, 18),
    # --- period 6 (group 3 belongs to the lanthanide row) ---
    ElementDef(55, "Cs", "Caesium", 6, 1),
    ElementDef(56, "Ba", "Barium", 6, 2),
    ElementDef(72, "Hf", "Hafnium", 6, 4),
    ElementDef(73, "Ta", "Tantalum", 6, 5),
    ElementDef(74, "W", "Tungsten", 6, 6),
    ElementDef(75, "Re", "Rhenium", 6, 7),
    ElementDef(76, "Os", "Osmium", 6, 8),
    ElementDef(77, "Ir", "Iridium", 6, 9),
    ElementDef(78, "Pt", "Platinum", 6, 10),
    ElementDef(79, "Au", "Gold", 6, 11),
    ElementDef(80, "Hg", "Mercury", 6, 12),
    ElementDef(81, "Tl", "Thallium", 6, 13),
    ElementDef(82, "Pb", "Lead", 6, 14),
    ElementDef(83, "Bi", "Bismuth", 6, 15),
    ElementDef(84, "Po", "Polonium", 6, 16),
    ElementDef(85, "At", "Astatine", 6, 17),
    ElementDef(86, "Rn", "Radon", 6, 18),
    # --- period 7 (group 3 belongs to the actinide row) ---
    ElementDef(87, "Fr", "Francium", 7, 1),
    ElementDef(88, "Ra", "Radium", 7, 2),
    ElementDef(104, "Rf", "Rutherfordium", 7, 4),
    ElementDef(105, "Db", "Dubnium", 7, 5),
    ElementDef(106, "Sg", "Seaborgium", 7, 6),
    ElementDef(107, "Bh", "Bohrium", 7, 7),
    ElementDef(108, "Hs", "Hassium", 7, 8),
    ElementDef(109, "Mt", "Meitnerium", 7, 9),
    ElementDef(110, "Ds", "Darmstadtium", 7, 10),
    ElementDef(111, "Rg", "Roentgenium", 7, 11),
    ElementDef(112, "Cn", "Copernicium", 7, 12),
    ElementDef(113, "Nh", "Nihonium", 7, 13),
    ElementDef(114, "Fl", "Flerovium", 7, 14),
    ElementDef(115, "Mc", "Moscovium", 7, 15),
    ElementDef(116, "Lv", "Livermorium", 7, 16),
    ElementDef(117, "Ts", "Tennessine", 7, 17),
    ElementDef(118, "Og", "Oganesson", 7, 18),
    # --- lanthanides ---
    ElementDef(57, "La", "Lanthanum", 8, 3),
    ElementDef(58, "Ce", "Cerium", 8, 4),
    ElementDef(59, "Pr", "Praseodymium", 8, 5),
    ElementDef(60, "Nd", "Neodymium", 8, 6),
    ElementDef(61, "Pm", "Promethium", 8, 7),
    ElementDef(62, "Sm", "Samarium", 8, 8),
    ElementDef(63, "Eu", "Europium", 8, 9),
    ElementDef(64, "Gd", "Gadolinium", 8, 10),
    ElementDef(65, "Tb", "Terbium", 8, 11),
    ElementDef(66, "Dy", "Dysprosium", 8, 12),
    ElementDef(67, "Ho", "Holmium", 8, 13),
    ElementDef(68, "Er", "Erbium", 8, 14),
    ElementDef(69, "Tm", "Thulium", 8, 15),
    ElementDef(70, "Yb", "Ytterbium", 8, 16),
    ElementDef(71, "Lu", "Lutetium", 8, 17),
    # --- actinides ---
    ElementDef(89, "Ac", "Actinium", 9, 3),
    ElementDef(90, "Th", "Thorium", 9, 4),
    ElementDef(91, "Pa", "Protactinium", 9, 5),
    ElementDef(92, "U", "Uranium", 9, 6),
    ElementDef(93, "Np", "Neptunium", 9, 7),
    ElementDef(94, "Pu", "Plutonium", 9, 8),
    ElementDef(95, "Am", "Americium", 9, 9),
    ElementDef(96, "Cm", "Curium", 9, 10),
    ElementDef(97, "Bk", "Berkelium", 9, 11),
    ElementDef(98, "Cf", "Californium", 9, 12),
    ElementDef(99, "Es", "Einsteinium", 9, 13),
    ElementDef(100, "Fm", "Fermium", 9, 14),
    ElementDef(101, "Md", "Mendelevium", 9, 15),
    ElementDef(102, "No", "Nobelium", 9, 16),
    ElementDef(103, "Lr", "Lawrencium", 9, 17),
)


class ElementCatalog:
    """Read-only lookup over a fixed sequence of ElementDef."""

    def __init__(self, elements: Iterable[ElementDef] = ALL_ELEMENTS) -> None:
        self._elements: Tuple[ElementDef, ...] = tuple(elements)
        self._by_z: Dict[int, ElementDef] = {e.Z: e for e in self._elements}
        self._by_symbol: Dict[str, ElementDef] = {e.symbol: e for e in self._elements}
        if len(self._by_z) != len(self._elements):
            raise ValueError("Element catalog contains duplicate Z values")

    def all(self) -> Tuple[ElementDef, ...]:
        return self._elements

    def lookup(self, Z: int) -> Optional[ElementDef]:
        return self._by_z.get(int(Z))

    def by_symbol(self, symbol: str) -> Optional[ElementDef]:
        return self._by_symbol.get(symbol)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, Z: object) -> bool:
        return Z in self._by_z

    def display_grid(self) -> np.ndarray:
        """
        Матрица (9, 18) с Z в ячейке (period-1, group-1); 0 — пустая ячейка.
        """
        grid = np.zeros((GRID_ROWS, GRID_COLUMNS), dtype=int)
        for e in self._elements:
            grid[e.period - 1, e.group - 1] = e.Z
        return grid


CATALOG = ElementCatalog()
