"""
Baked-in identifier and name tables for the standard partition schemes.

Every table is an ordered tuple of ``(ID, NAME)`` pairs. Names are stored
exactly as catalogued: division names are upper case without commas (the
``&`` character is allowed), state names are title case.

Climate division IDs are ``state_code * 100 + division`` where
``state_code`` is the 1-based position of the state in
:data:`CONUS_STATE_CODES`.
"""

from __future__ import annotations

__all__ = [
    "CENSUS_DIVISIONS",
    "CENSUS_DIVISION_MEMBERS",
    "CLIMATE_DIVISIONS",
    "CLIMATE_DIVISION_FORECAST_DIVISIONS",
    "CONUS_STATE_CODES",
    "FORECAST_DIVISIONS",
    "NON_CONTIGUOUS_STATES",
    "STATES",
]

CENSUS_DIVISIONS = (
    (1, "NEW ENGLAND"),
    (2, "MIDDLE ATLANTIC"),
    (3, "E N CENTRAL"),
    (4, "W N CENTRAL"),
    (5, "SOUTH ATLANTIC"),
    (6, "E S CENTRAL"),
    (7, "W S CENTRAL"),
    (8, "MOUNTAIN"),
    (9, "PACIFIC"),
)

STATES = (
    ("AL", "Alabama"),
    ("AK", "Alaska"),
    ("AZ", "Arizona"),
    ("AR", "Arkansas"),
    ("CA", "California"),
    ("CO", "Colorado"),
    ("CT", "Connecticut"),
    ("DE", "Delaware"),
    ("FL", "Florida"),
    ("GA", "Georgia"),
    ("HI", "Hawaii"),
    ("ID", "Idaho"),
    ("IL", "Illinois"),
    ("IN", "Indiana"),
    ("IA", "Iowa"),
    ("KS", "Kansas"),
    ("KY", "Kentucky"),
    ("LA", "Louisiana"),
    ("ME", "Maine"),
    ("MD", "Maryland"),
    ("MA", "Massachusetts"),
    ("MI", "Michigan"),
    ("MN", "Minnesota"),
    ("MS", "Mississippi"),
    ("MO", "Missouri"),
    ("MT", "Montana"),
    ("NE", "Nebraska"),
    ("NV", "Nevada"),
    ("NH", "New Hampshire"),
    ("NJ", "New Jersey"),
    ("NM", "New Mexico"),
    ("NY", "New York"),
    ("NC", "North Carolina"),
    ("ND", "North Dakota"),
    ("OH", "Ohio"),
    ("OK", "Oklahoma"),
    ("OR", "Oregon"),
    ("PA", "Pennsylvania"),
    ("RI", "Rhode Island"),
    ("SC", "South Carolina"),
    ("SD", "South Dakota"),
    ("TN", "Tennessee"),
    ("TX", "Texas"),
    ("UT", "Utah"),
    ("VT", "Vermont"),
    ("VA", "Virginia"),
    ("WA", "Washington"),
    ("WV", "West Virginia"),
    ("WI", "Wisconsin"),
    ("WY", "Wyoming"),
)

NON_CONTIGUOUS_STATES = ("AK", "HI")

# Position (1-based) is the state code used in climate division IDs
CONUS_STATE_CODES = tuple(
    state_id for state_id, _ in STATES if state_id not in NON_CONTIGUOUS_STATES
)

CENSUS_DIVISION_MEMBERS = {
    1: ("CT", "ME", "MA", "NH", "RI", "VT"),
    2: ("NJ", "NY", "PA"),
    3: ("IN", "IL", "MI", "OH", "WI"),
    4: ("IA", "KS", "MN", "MO", "NE", "ND", "SD"),
    5: ("DE", "FL", "GA", "MD", "NC", "SC", "VA", "WV"),
    6: ("AL", "KY", "MS", "TN"),
    7: ("AR", "LA", "OK", "TX"),
    8: ("AZ", "CO", "ID", "NM", "MT", "UT", "NV", "WY"),
    9: ("AK", "CA", "HI", "OR", "WA"),
}

FORECAST_DIVISIONS = (
    (1, "NORTHERN NEW ENGLAND"),
    (2, "NORTHEAST NEW ENGLAND"),
    (3, "NORTHERN NEW YORK"),
    (4, "SOUTHERN NEW ENGLAND"),
    (5, "EASTERN GREAT LAKES"),
    (6, "OHIO"),
    (7, "MID-ATLANTIC COAST"),
    (8, "NORTHERN APPALACHAIN"),
    (9, "CENTRAL APPALACHAIN"),
    (10, "COASTAL VIRGINIA"),
    (11, "SOUTHERN APPALACHAIN"),
    (12, "COASTAL CAROLINAS"),
    (13, "INTERIOR CAROLINAS"),
    (14, "MICHIGAN UPPER PEN."),
    (15, "NORTHERN MINNISOTA"),
    (16, "EASTERN NORTH DAKOTA"),
    (17, "WESTERN NORTH DAKOTA"),
    (18, "EASTERN MONTANA"),
    (19, "NORTH-CENTRAL MONTANA"),
    (20, "SOUTH CENTRAL MONTANA"),
    (21, "WESTERN MONTANA"),
    (22, "NORTH-CENTRAL MICHIGAN"),
    (23, "SOUTHERN MICHIGAN"),
    (24, "EAST-CENTRAL ILLINOIS"),
    (25, "NORTHERN ILLINOIS"),
    (26, "NORTHERN WISCONSIN"),
    (27, "SOUTHEASTERN MINNISOTA"),
    (28, "EASTERN SOUTH DAKOTA"),
    (29, "CENTRAL SOUTH DAKOTA"),
    (30, "WESTERN SOUTH DAKOTA"),
    (31, "NORTHEAST WYOMING"),
    (32, "NORTHWEST WYOMING"),
    (33, "EASTERN IOWA"),
    (34, "NORTHWEST IOWA"),
    (35, "CENTRAL NEBRASKA"),
    (36, "SOUTHERN NEBRASKA"),
    (37, "WESTERN NEBRASKA/CHEYENE"),
    (38, "EASTERN KENTUCKY"),
    (39, "WESTERN KENTUCKY"),
    (40, "SOUTHEAST MISSOURI"),
    (41, "NORTHEAST MISSOURI"),
    (42, "NORTHWEST MISSOURI"),
    (43, "EASTERN KANSAS"),
    (44, "CENTRAL KANSAS"),
    (45, "WESTERN KANSAS"),
    (46, "NORTHEAST COLORADO"),
    (47, "SOUTHEAST COLORADO"),
    (48, "WESTERN COLORADO"),
    (49, "SOUTHWEST WYOMING"),
    (50, "CENTRAL TENNESSEE"),
    (51, "WESTERN TENNESSEE"),
    (52, "OZARK MOUNTAINS"),
    (53, "CENTRAL OKLAHOMA"),
    (54, "TEXAS WEST OF ABILENE"),
    (55, "NORTH HIGH PLAINS TEXAS"),
    (56, "NORTHERN GEORGIA"),
    (57, "NORTHERN ALABAMA"),
    (58, "CENTRAL MISSISSIPPI"),
    (59, "SOUTHERN ARKANSAS"),
    (60, "EAST TEXAS"),
    (61, "DALLAS AREA TEXAS"),
    (62, "SAN ANTINIO AREA TEXAS"),
    (63, "FAR SOUTHERN TEXAS"),
    (64, "WEST-CENTRAL TEXAS"),
    (65, "WESTERN TEXAS PANHANDLE"),
    (66, "JACKSONVILLE FLORIDA AREA"),
    (67, "CENTRAL FLORIDA"),
    (68, "SOUTHERN FLORIDA"),
    (69, "FLORIDA PANHANDLE"),
    (70, "COASTAL LOUISIANA"),
    (71, "COASTAL TEXAS NEAR HOUSTON"),
    (72, "NORTHEAST WASHINGTON"),
    (73, "PENDELTON AREA OREGON"),
    (74, "CENTRAL WASHINGTON"),
    (75, "SEATTLE AREA WASHINGTON"),
    (76, "WASHINGTON COAST"),
    (77, "EASTERN IDAHO"),
    (78, "IDAHO CENTRAL MOUNTAINS"),
    (79, "SOUTHWEST IDAHO"),
    (80, "EASTERN OREGON"),
    (81, "OREGON COASTAL VALLEY"),
    (82, "OREGON COAST"),
    (83, "NORTHEAST UTAH"),
    (84, "SOUTHEAST UTAH"),
    (85, "WESTERN UTAH"),
    (86, "NORTHEAST NEVADA"),
    (87, "NORTHWEST NEVADA"),
    (88, "SACREMENTO AREA CALIFORNIA"),
    (89, "NORTHERN CALIFORNIA COAST"),
    (90, "CENTRAL NEVADA"),
    (91, "FRESNO AREA CALIFORNIA"),
    (92, "CENTRAL CALIFORNIA COAST"),
    (93, "SOUTHERN CALIFORNIA COAST"),
    (94, "SOUTHEAST CALIFORNIA"),
    (95, "LAS VEGAS NEVADA AREA"),
    (96, "SOUTHWEST ARIZONA"),
    (97, "NORTHEAST ARIZONA"),
    (98, "SOUTHEAST ARIZONA"),
    (99, "NORTHERN NEW MEXICO"),
    (100, "EASTERN NEW MEXICO"),
    (101, "CENTRAL NEW MEXICO"),
    (102, "SOUTHERN NEW MEXICO"),
)

CLIMATE_DIVISIONS = (
    (101, "NORTHERN VALLEY"),
    (102, "APPALACHIAN MOUNTAIN"),
    (103, "UPPER PLAINS"),
    (104, "EASTERN VALLEY"),
    (105, "PIEDMONT PLATEAU"),
    (106, "PRAIRIE"),
    (107, "COASTAL PLAIN"),
    (108, "GULF"),
    (201, "NORTHWEST"),
    (202, "NORTHEAST"),
    (203, "NORTH CENTRAL"),
    (204, "EAST CENTRAL"),
    (205, "SOUTHWEST"),
    (206, "SOUTH CENTRAL"),
    (207, "SOUTHEAST"),
    (301, "NORTHWEST"),
    (302, "NORTH CENTRAL"),
    (303, "NORTHEAST"),
    (304, "WEST CENTRAL"),
    (305, "CENTRAL"),
    (306, "EAST CENTRAL"),
    (307, "SOUTHWEST"),
    (308, "SOUTH CENTRAL"),
    (309, "SOUTHEAST"),
    (401, "NORTH COAST DRAINAGE"),
    (402, "SACRAMENTO DRNG."),
    (403, "NORTHEAST INTER. BASINS"),
    (404, "CENTRAL COAST DRNG."),
    (405, "SAN JOAQUIN DRNG."),
    (406, "SOUTH COAST DRNG."),
    (407, "SOUTHEAST DESERT BASIN"),
    (501, "ARKANSAS DRAINAGE BASIN"),
    (502, "COLORADO DRAINAGE BASIN"),
    (503, "KANSAS DRAINAGE BASIN"),
    (504, "PLATTE DRAINAGE BASIN"),
    (505, "RIO GRANDE DRAINAGE BASIN"),
    (601, "NORTHWEST"),
    (602, "CENTRAL"),
    (603, "COASTAL"),
    (701, "NORTHERN"),
    (702, "SOUTHERN"),
    (801, "NORTHWEST"),
    (802, "NORTH"),
    (803, "NORTH CENTRAL"),
    (804, "SOUTH CENTRAL"),
    (805, "EVERGLADES"),
    (806, "LOWER EAST COAST"),
    (807, "KEYS"),
    (901, "NORTHWEST"),
    (902, "NORTH CENTRAL"),
    (903, "NORTHEAST"),
    (904, "WEST CENTRAL"),
    (905, "CENTRAL"),
    (906, "EAST CENTRAL"),
    (907, "SOUTHWEST"),
    (908, "SOUTH CENTRAL"),
    (909, "SOUTHEAST"),
    (1001, "PANHANDLE"),
    (1002, "NORTH CENTRAL PRAIRIES"),
    (1003, "NORTH CENTRAL CANYONS"),
    (1004, "CENTRAL MOUNTAINS"),
    (1005, "SOUTHWESTERN VALLEYS"),
    (1006, "SOUTHWESTERN HIGHLANDS"),
    (1007, "CENTRAL PLAINS"),
    (1008, "NORTHEASTERN VALLEYS"),
    (1009, "UPPER SNAKE RIVER PLAINS"),
    (1010, "EASTERN HIGHLANDS"),
    (1101, "NORTHWEST"),
    (1102, "NORTHEAST"),
    (1103, "WEST"),
    (1104, "CENTRAL"),
    (1105, "EAST"),
    (1106, "WEST SOUTHWEST"),
    (1107, "EAST SOUTHEAST"),
    (1108, "SOUTHWEST"),
    (1109, "SOUTHEAST"),
    (1201, "NORTHWEST"),
    (1202, "NORTH CENTRAL"),
    (1203, "NORTHEAST"),
    (1204, "WEST CENTRAL"),
    (1205, "CENTRAL"),
    (1206, "EAST CENTRAL"),
    (1207, "SOUTHWEST"),
    (1208, "SOUTH CENTRAL"),
    (1209, "SOUTHEAST"),
    (1301, "NORTHWEST"),
    (1302, "NORTH CENTRAL"),
    (1303, "NORTHEAST"),
    (1304, "WEST CENTRAL"),
    (1305, "CENTRAL"),
    (1306, "EAST CENTRAL"),
    (1307, "SOUTHWEST"),
    (1308, "SOUTH CENTRAL"),
    (1309, "SOUTHEAST"),
    (1401, "NORTHWEST"),
    (1402, "NORTH CENTRAL"),
    (1403, "NORTHEAST"),
    (1404, "WEST CENTRAL"),
    (1405, "CENTRAL"),
    (1406, "EAST CENTRAL"),
    (1407, "SOUTHWEST"),
    (1408, "SOUTH CENTRAL"),
    (1409, "SOUTHEAST"),
    (1501, "WESTERN"),
    (1502, "CENTRAL"),
    (1503, "BLUE GRASS"),
    (1504, "EASTERN"),
    (1601, "NORTHWEST"),
    (1602, "NORTH CENTRAL"),
    (1603, "NORTHEAST"),
    (1604, "WEST CENTRAL"),
    (1605, "CENTRAL"),
    (1606, "EAST CENTRAL"),
    (1607, "SOUTHWEST"),
    (1608, "SOUTH CENTRAL"),
    (1609, "SOUTHEAST"),
    (1701, "NORTHERN"),
    (1702, "SOUTHERN INTERIOR"),
    (1703, "COASTAL"),
    (1801, "SOUTHEASTERN SHORE"),
    (1802, "CENTRAL EASTERN SHORE"),
    (1803, "LOWER SOUTHERN"),
    (1804, "UPPER SOUTHERN"),
    (1805, "NORTHEASTERN SHORE"),
    (1806, "NORTHERN CENTRAL"),
    (1807, "APPALACHIAN MOUNTAIN"),
    (1808, "ALLEGHENY PLATEAU"),
    (1901, "WESTERN"),
    (1902, "CENTRAL"),
    (1903, "COASTAL"),
    (2001, "WEST UPPER"),
    (2002, "EAST UPPER"),
    (2003, "NORTHWEST"),
    (2004, "NORTHEAST LOWER"),
    (2005, "WEST CENTRAL LOWER"),
    (2006, "CENTRAL LOWER"),
    (2007, "EAST CENTRAL LOWER"),
    (2008, "SOUTHWEST LOWER"),
    (2009, "SOUTH CENTRAL LOWER"),
    (2010, "SOUTHEAST LOWER"),
    (2101, "NORTHWEST"),
    (2102, "NORTH CENTRAL"),
    (2103, "NORTHEAST"),
    (2104, "WEST CENTRAL"),
    (2105, "CENTRAL"),
    (2106, "EAST CENTRAL"),
    (2107, "SOUTHWEST"),
    (2108, "SOUTH CENTRAL"),
    (2109, "SOUTHEAST"),
    (2201, "UPPER DELTA"),
    (2202, "NORTH CENTRAL"),
    (2203, "NORTHEAST"),
    (2204, "LOWER DELTA"),
    (2205, "CENTRAL"),
    (2206, "EAST CENTRAL"),
    (2207, "SOUTHWEST"),
    (2208, "SOUTH CENTRAL"),
    (2209, "SOUTHEAST"),
    (2210, "COASTAL"),
    (2301, "NORTHWEST PRAIRIE"),
    (2302, "NORTHEAST PRAIRIE"),
    (2303, "WEST CENTRAL PLAINS"),
    (2304, "WEST OZARKS"),
    (2305, "EAST OZARKS"),
    (2306, "BOOTHEEL"),
    (2401, "WESTERN"),
    (2402, "SOUTHWESTERN"),
    (2403, "NORTH CENTRAL"),
    (2404, "CENTRAL"),
    (2405, "SOUTH CENTRAL"),
    (2406, "NORTHEASTERN"),
    (2407, "SOUTHEASTERN"),
    (2501, "PANHANDLE"),
    (2502, "NORTH CENTRAL"),
    (2503, "NORTHEAST"),
    (2505, "CENTRAL"),
    (2506, "EAST CENTRAL"),
    (2507, "SOUTHWEST"),
    (2508, "SOUTH CENTRAL"),
    (2509, "SOUTHEAST"),
    (2601, "NORTHWESTERN"),
    (2602, "NORTHEASTERN"),
    (2603, "SOUTH CENTRAL"),
    (2604, "EXTREME SOUTHERN"),
    (2701, "NORTHERN"),
    (2702, "SOUTHERN"),
    (2801, "NORTHERN"),
    (2802, "SOUTHERN"),
    (2803, "COASTAL"),
    (2901, "NORTHWESTERN PLATEAU"),
    (2902, "NORTHERN MOUNTAINS"),
    (2903, "NORTHEASTERN PLAINS"),
    (2904, "SOUTHWESTERN MOUNTAINS"),
    (2905, "CENTRAL VALLEY"),
    (2906, "CENTRAL HIGHLANDS"),
    (2907, "SOUTHEASTERN PLAINS"),
    (2908, "SOUTHERN DESERT"),
    (3001, "WESTERN PLATEAU"),
    (3002, "EASTERN PLATEAU"),
    (3003, "NORTHERN PLATEAU"),
    (3004, "COASTAL"),
    (3005, "HUDSON VALLEY"),
    (3006, "MOHAWK VALLEY"),
    (3007, "CHAMPLAIN VALLEY"),
    (3008, "ST. LAWRENCE VALLEY"),
    (3009, "GREAT LAKES"),
    (3010, "CENTRAL LAKES"),
    (3101, "SOUTHERN MOUNTAINS"),
    (3102, "NORTHERN MOUNTAINS"),
    (3103, "NORTHERN PIEDMONT"),
    (3104, "CENTRAL PIEDMONT"),
    (3105, "SOUTHERN PIEDMONT"),
    (3106, "SOUTHERN COASTAL PLAIN"),
    (3107, "CENTRAL COASTAL PLAIN"),
    (3108, "NORTHERN COASTAL PLAIN"),
    (3201, "NORTHWEST"),
    (3202, "NORTH CENTRAL"),
    (3203, "NORTHEAST"),
    (3204, "WEST CENTRAL"),
    (3205, "CENTRAL"),
    (3206, "EAST CENTRAL"),
    (3207, "SOUTHWEST"),
    (3208, "SOUTH CENTRAL"),
    (3209, "SOUTHEAST"),
    (3301, "NORTHWEST"),
    (3302, "NORTH CENTRAL"),
    (3303, "NORTHEAST"),
    (3304, "WEST CENTRAL"),
    (3305, "CENTRAL"),
    (3306, "EAST CENTRAL"),
    (3307, "NORTHEAST HILLS"),
    (3308, "SOUTHWEST"),
    (3309, "SOUTH CENTRAL"),
    (3310, "SOUTHEAST"),
    (3401, "PANHANDLE"),
    (3402, "NORTH CENTRAL"),
    (3403, "NORTHEAST"),
    (3404, "WEST CENTRAL"),
    (3405, "CENTRAL"),
    (3406, "EAST CENTRAL"),
    (3407, "SOUTHWEST"),
    (3408, "SOUTH CENTRAL"),
    (3409, "SOUTHEAST"),
    (3501, "COASTAL AREA"),
    (3502, "WILLAMETTE VALLEY"),
    (3503, "SOUTHWESTERN VALLEYS"),
    (3504, "NORTHERN CASCADES"),
    (3505, "HIGH PLATEAU"),
    (3506, "NORTH CENTRAL"),
    (3507, "SOUTH CENTRAL"),
    (3508, "NORTHEAST"),
    (3509, "SOUTHEAST"),
    (3601, "POCONO MOUNTAINS"),
    (3602, "EAST CENTRAL MOUNTAINS"),
    (3603, "SOUTHEASTERN PIEDMONT"),
    (3604, "LOWER SUSQUEHANNA"),
    (3605, "MIDDLE SUSQUEHANNA"),
    (3606, "UPPER SUSQUEHANNA"),
    (3607, "CENTRAL MOUNTAINS"),
    (3608, "SOUTH CENTRAL MOUNTAINS"),
    (3609, "SOUTHWEST PLATEAU"),
    (3610, "NORTHWEST PLATEAU"),
    (3701, "ALL"),
    (3801, "MOUNTAIN"),
    (3802, "NORTHWEST"),
    (3803, "NORTH CENTRAL"),
    (3804, "NORTHEAST"),
    (3805, "WEST CENTRAL"),
    (3806, "CENTRAL"),
    (3807, "SOUTHERN"),
    (3901, "NORTHWEST"),
    (3902, "NORTH CENTRAL"),
    (3903, "NORTHEAST"),
    (3904, "BLACK HILLS"),
    (3905, "SOUTHWEST"),
    (3906, "CENTRAL"),
    (3907, "EAST CENTRAL"),
    (3908, "SOUTH CENTRAL"),
    (3909, "SOUTHEAST"),
    (4001, "EASTERN"),
    (4002, "CUMBERLAND PLATEAU"),
    (4003, "MIDDLE"),
    (4004, "WESTERN"),
    (4101, "HIGH PLAINS"),
    (4102, "LOW ROLLING PLAINS"),
    (4103, "NORTH CENTRAL"),
    (4104, "EAST TEXAS"),
    (4105, "TRANS PECOS"),
    (4106, "EDWARDS PLATEAU"),
    (4107, "SOUTH CENTRAL"),
    (4108, "UPPER COAST"),
    (4109, "SOUTHERN"),
    (4110, "LOWER VALLEY"),
    (4201, "WESTERN"),
    (4202, "DIXIE"),
    (4203, "NORTH CENTRAL"),
    (4204, "SOUTH CENTRAL"),
    (4205, "NORTHERN MOUNTAINS"),
    (4206, "UINTA BASIN"),
    (4207, "SOUTHEAST"),
    (4301, "NORTHEASTERN"),
    (4302, "WESTERN"),
    (4303, "SOUTHEASTERN"),
    (4401, "TIDEWATER"),
    (4402, "EASTERN PIEDMONT"),
    (4403, "WESTERN PIEDMONT"),
    (4404, "NORTHERN"),
    (4405, "CENTRAL MOUNTAIN"),
    (4406, "SOUTHWESTERN MOUNTAIN"),
    (4501, "WEST OLYMPIC COAST"),
    (4502, "NE OLYMPIC SAN JUAN"),
    (4503, "PUGET SOUND LOWLANDS"),
    (4504, "E OLYMPIC CASCADE FOOTHILLS"),
    (4505, "CASCADE MOUNTAINS WEST"),
    (4506, "EAST SLOPE CASCADES"),
    (4507, "OKANOGAN BIG BEND"),
    (4508, "CENTRAL BASIN"),
    (4509, "NORTHEASTERN"),
    (4510, "PALOUSE BLUE MOUNTAINS"),
    (4601, "NORTHWESTERN"),
    (4602, "NORTH CENTRAL"),
    (4603, "SOUTHWESTERN"),
    (4604, "CENTRAL"),
    (4605, "SOUTHERN"),
    (4606, "NORTHEASTERN"),
    (4701, "NORTHWEST"),
    (4702, "NORTH CENTRAL"),
    (4703, "NORTHEAST"),
    (4704, "WEST CENTRAL"),
    (4705, "CENTRAL"),
    (4706, "EAST CENTRAL"),
    (4707, "SOUTHWEST"),
    (4708, "SOUTH CENTRAL"),
    (4709, "SOUTHEAST"),
    (4801, "YELLOWSTONE DRAINAGE"),
    (4802, "SNAKE DRAINAGE"),
    (4803, "GREEN AND BEAR DRAINAGE"),
    (4804, "BIG HORN"),
    (4805, "POWDER & LITTLE MISSOURI & TONGU"),
    (4806, "BELLE FOURCHE DRAINAGE"),
    (4807, "CHEYENNE & NIOBRARA DRAINAGE"),
    (4808, "LOWER PLATTE"),
    (4809, "WIND RIVER"),
    (4810, "UPPER PLATTE"),
)

CLIMATE_DIVISION_FORECAST_DIVISIONS = {
    101: 50, 102: 57, 103: 57, 104: 57, 105: 57, 106: 57, 107: 69, 108: 69, 201: 95,
    202: 97, 203: 96, 204: 96, 205: 96, 206: 96, 207: 98, 301: 52, 302: 52, 303: 51,
    304: 52, 305: 59, 306: 51, 307: 59, 308: 59, 309: 59, 401: 89, 402: 88, 403: 87,
    404: 92, 405: 91, 406: 93, 407: 94, 501: 47, 502: 48, 503: 46, 504: 46, 505: 99,
    601: 4, 602: 4, 603: 4, 701: 7, 702: 7, 801: 69, 802: 66, 803: 67, 804: 67, 805: 68,
    806: 68, 807: 68, 901: 56, 902: 56, 903: 56, 904: 56, 905: 56, 906: 56, 907: 66,
    908: 66, 909: 66, 1001: 72, 1002: 73, 1003: 73, 1004: 78, 1005: 79, 1006: 79,
    1007: 77, 1008: 78, 1009: 77, 1010: 77, 1101: 25, 1102: 25, 1103: 41, 1104: 24,
    1105: 24, 1106: 41, 1107: 24, 1108: 40, 1109: 39, 1201: 24, 1202: 23, 1203: 23,
    1204: 24, 1205: 24, 1206: 6, 1207: 39, 1208: 39, 1209: 38, 1301: 34, 1302: 33,
    1303: 33, 1304: 34, 1305: 33, 1306: 33, 1307: 36, 1308: 33, 1309: 33, 1401: 45,
    1402: 44, 1403: 43, 1404: 45, 1405: 44, 1406: 43, 1407: 45, 1408: 44, 1409: 43,
    1501: 39, 1502: 39, 1503: 38, 1504: 38, 1601: 59, 1602: 59, 1603: 59, 1604: 71,
    1605: 70, 1606: 70, 1607: 71, 1608: 70, 1609: 70, 1701: 1, 1702: 2, 1703: 2,
    1801: 7, 1802: 7, 1803: 7, 1804: 7, 1805: 7, 1806: 7, 1807: 9, 1808: 9, 1901: 4,
    1902: 4, 1903: 4, 2001: 14, 2002: 14, 2003: 22, 2004: 22, 2005: 22, 2006: 22,
    2007: 22, 2008: 22, 2009: 23, 2010: 23, 2101: 15, 2102: 15, 2103: 15, 2104: 28,
    2105: 27, 2106: 27, 2107: 28, 2108: 27, 2109: 27, 2201: 51, 2202: 51, 2203: 51,
    2204: 58, 2205: 58, 2206: 58, 2207: 58, 2208: 58, 2209: 58, 2210: 70, 2301: 42,
    2302: 41, 2303: 42, 2304: 52, 2305: 40, 2306: 40, 2401: 21, 2402: 21, 2403: 19,
    2404: 20, 2405: 20, 2406: 18, 2407: 18, 2501: 37, 2502: 35, 2503: 34, 2505: 36,
    2506: 36, 2507: 35, 2508: 36, 2509: 36, 2601: 87, 2602: 86, 2603: 90, 2604: 95,
    2701: 1, 2702: 2, 2801: 4, 2802: 7, 2803: 7, 2901: 99, 2902: 99, 2903: 100,
    2904: 101, 2905: 101, 2906: 101, 2907: 100, 2908: 102, 3001: 5, 3002: 3, 3003: 3,
    3004: 4, 3005: 4, 3006: 3, 3007: 3, 3008: 3, 3009: 5, 3010: 5, 3101: 11, 3102: 11,
    3103: 13, 3104: 13, 3105: 13, 3106: 12, 3107: 12, 3108: 10, 3201: 17, 3202: 16,
    3203: 16, 3204: 17, 3205: 16, 3206: 16, 3207: 17, 3208: 17, 3209: 16, 3301: 23,
    3302: 6, 3303: 5, 3304: 6, 3305: 6, 3306: 6, 3307: 6, 3308: 6, 3309: 38, 3310: 6,
    3401: 45, 3402: 53, 3403: 43, 3404: 53, 3405: 53, 3406: 52, 3407: 54, 3408: 53,
    3409: 52, 3501: 82, 3502: 81, 3503: 81, 3504: 81, 3505: 80, 3506: 74, 3507: 80,
    3508: 73, 3509: 79, 3601: 8, 3602: 7, 3603: 7, 3604: 7, 3605: 8, 3606: 8, 3607: 8,
    3608: 8, 3609: 8, 3610: 5, 3701: 4, 3801: 11, 3802: 13, 3803: 13, 3804: 12,
    3805: 13, 3806: 13, 3807: 12, 3901: 30, 3902: 29, 3903: 28, 3904: 30, 3905: 30,
    3906: 29, 3907: 28, 3908: 29, 3909: 34, 4001: 11, 4002: 50, 4003: 50, 4004: 51,
    4101: 55, 4102: 54, 4103: 61, 4104: 60, 4105: 65, 4106: 64, 4107: 62, 4108: 71,
    4109: 63, 4110: 63, 4201: 85, 4202: 85, 4203: 83, 4204: 84, 4205: 83, 4206: 83,
    4207: 84, 4301: 1, 4302: 3, 4303: 4, 4401: 10, 4402: 10, 4403: 10, 4404: 7, 4405: 9,
    4406: 11, 4501: 76, 4502: 76, 4503: 75, 4504: 75, 4505: 75, 4506: 74, 4507: 72,
    4508: 74, 4509: 72, 4510: 73, 4601: 9, 4602: 9, 4603: 9, 4604: 9, 4605: 9, 4606: 9,
    4701: 26, 4702: 26, 4703: 14, 4704: 26, 4705: 26, 4706: 14, 4707: 25, 4708: 25,
    4709: 25, 4801: 32, 4802: 32, 4803: 49, 4804: 32, 4805: 31, 4806: 31, 4807: 31,
    4808: 37, 4809: 32, 4810: 49,
}
