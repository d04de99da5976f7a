"""Reference datasets used by the demo script and regression tests.

ALL_STATES_S1701 holds one population figure per US state plus DC and
Puerto Rico (census table S1701), in table order. Published classification
fixtures for this dataset exist for quantile and equal-interval schemes.
"""

from __future__ import annotations

ALL_STATES_S1701: tuple[int, ...] = (
    4781688, 713725, 7116266, 2929117, 38733295, 5637904, 3460446, 944955, 673041, 21048884,
    10332523, 1379078, 1753946, 12373209, 6517430, 3058938, 2826818, 4326675, 4515876, 1304100,
    5898360, 6656430, 9772151, 5515416, 2877843, 5953025, 1042682, 1877629, 3037199, 1316495,
    8712974, 2053305, 18932499, 10199239, 738814, 11362386, 3841763, 4136542, 12387178, 3167190,
    1018586, 5003235, 854648, 6656385, 28361423, 3157996, 599030, 8279357, 7470152, 1739050,
    5675557, 563528,
)

ALL_STATES_S1701_SORTED: tuple[int, ...] = tuple(sorted(ALL_STATES_S1701))
