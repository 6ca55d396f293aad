"""
Stable-isotope anchors: Z -> neutron counts N = A - Z of real (or effectively
stable, very long-lived) nuclides.

Dense through U. An empty tuple means "no stable isotope on record"; the
oracle then falls back to the approximate valley curve, exactly as for
Z > 92, which has no entry at all.
"""

from __future__ import annotations

from typing import Dict, Tuple


StableIsotopeTable = Dict[int, Tuple[int, ...]]


DEFAULT_STABLE_ISOTOPES: StableIsotopeTable = {
    # H .. Ca
    1: (0, 1),  # H-1, H-2
    2: (1, 2),  # He-3, He-4
    3: (3, 4),  # Li-6, Li-7
    4: (5,),  # Be-9
    5: (5, 6),  # B-10, B-11
    6: (6, 7),  # C-12, C-13
    7: (7, 8),  # N-14, N-15
    8: (8, 9, 10),  # O-16, O-17, O-18
    9: (10,),  # F-19
    10: (10, 11, 12),  # Ne-20, Ne-21, Ne-22
    11: (12,),  # Na-23
    12: (12, 13),  # Mg-24, Mg-25
    13: (14,),  # Al-27
    14: (14, 15),  # Si-28, Si-29
    15: (16,),  # P-31
    16: (16, 18),  # S-32, S-34
    17: (18, 20),  # Cl-35, Cl-37
    18: (22,),  # Ar-40
    19: (20,),  # K-39
    20: (20, 21, 22),  # Ca-40, Ca-41, Ca-42
    # Sc .. Kr
    21: (24,),  # Sc-45
    22: (26,),  # Ti-48
    23: (28,),  # V-51
    24: (28,),  # Cr-52
    25: (30,),  # Mn-55
    26: (30,),  # Fe-56
    27: (32,),  # Co-59
    28: (30, 32),  # Ni-58, Ni-60
    29: (34,),  # Cu-63
    30: (34,),  # Zn-64
    31: (38,),  # Ga-69
    32: (40, 42),  # Ge-72, Ge-74
    33: (42,),  # As-75
    34: (44, 46),  # Se-78, Se-80
    35: (46, 48),  # Br-81, Br-83
    36: (48, 50),  # Kr-84, Kr-86
    # period 5
    37: (48, 50),  # Rb-85, Rb-87
    38: (50, 52),  # Sr-88, Sr-90
    39: (50,),  # Y-89
    40: (50, 52),  # Zr-90, Zr-92
    41: (52, 54),  # Nb-93, Nb-95
    42: (54, 56),  # Mo-96, Mo-98
    43: (),  # Tc
    44: (56, 58),  # Ru-100, Ru-102
    45: (58,),  # Rh-103
    46: (60,),  # Pd-106
    47: (60, 62),  # Ag-107, Ag-109
    48: (64, 66),  # Cd-112, Cd-114
    49: (66, 68),  # In-115, In-117
    50: (68, 70, 72),  # Sn-118, Sn-120, Sn-122
    51: (72,),  # Sb-123
    52: (74, 76),  # Te-126, Te-128
    53: (74, 76),  # I-127, I-129
    54: (77, 78, 80),  # Xe-131, Xe-132, Xe-134
    # period 6
    55: (78,),  # Cs-133
    56: (80, 82),  # Ba-136, Ba-138
    57: (82,),  # La-139
    58: (82, 84),  # Ce-140, Ce-142
    59: (84,),  # Pr-143
    60: (86,),  # Nd-146
    61: (),  # Pm
    62: (88,),  # Sm-150
    63: (88, 90),  # Eu-151, Eu-153
    64: (90, 92),  # Gd-154, Gd-156
    65: (92,),  # Tb-157
    66: (94,),  # Dy-160
    67: (94, 96),  # Ho-161, Ho-163
    68: (96, 98),  # Er-164, Er-166
    69: (98,),  # Tm-167
    70: (100, 102),  # Yb-170, Yb-172
    71: (104,),  # Lu-175
    72: (106,),  # Hf-178
    73: (108,),  # Ta-181
    74: (110,),  # W-184
    75: (112,),  # Re-187
    76: (116,),  # Os-192
    77: (118,),  # Ir-195
    78: (118, 120),  # Pt-196, Pt-198
    79: (118, 120),  # Au-197, Au-199
    80: (122, 124),  # Hg-202, Hg-204
    # Tl .. U, long-lived heavies count as stable here
    81: (124,),  # Tl-205
    82: (126,),  # Pb-208
    83: (126,),  # Bi-209
    84: (),  # Po
    85: (),  # At
    86: (),  # Rn
    87: (),  # Fr
    88: (138,),  # Ra-226
    89: (140,),  # Ac-229
    90: (142,),  # Th-232
    91: (144,),  # Pa-235
    92: (146,),  # U-238
}
