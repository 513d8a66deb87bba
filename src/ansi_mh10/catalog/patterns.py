"""
Value Patterns

Named regular expressions for MH10.8.2 data identifier values, referenced by
name from the catalog data file. Patterns are applied to the whole value.

Patterns are compiled with the ``regex`` package, which supports a per-match
timeout.
"""

PATTERNS: dict[str, str] = {
    "date_pattern_dd_mm_yy": (
        r"(((0\d|[12]\d|3[01])(0[13578]|1[02])(\d{2}))|((0\d|[12]\d|30)(0[13456789]|1[012])(\d{2}))|((0\d|1\d|2[0-8])02(\d{2}))|(2902((0[048]|[2468][048]|[13579][26]))))"
    ),
    "date_pattern_dd_mm_yyyy": (
        r"^(((0[1-9]|[12]\d|30)[-/]?(0[13-9]|1[012])|31[-/]?(0[13578]|1[02])|(0[1-9]|1\d|2[0-8])[-/]?02)[-/]?\d{4}|29[-/]?02[-/]?(\d{2}(([2468][048]|[02468][48])|[13579][26])|([13579][26]|[02468][048]|0\d|1[0-6])00))$"
    ),
    "date_pattern_mm_dd_yy": (
        r"(((0[13578]|1[02])(0\d|[12]\d|3[01])(\d{2}))|((0[13456789]|1[012])(0\d|[12]\d|30)(\d{2}))|(02(0\d|1\d|2[0-8])(\d{2}))|(0229((0[048]|[2468][048]|[13579][26]))))"
    ),
    "date_pattern_yddd_julian": r"^(\d)(00[1-9]|0[1-9]\d|[1-2]\d\d|3[0-5]\d|36[0-6])$",
    "date_pattern_yy_ddd_julian": r"^(\d{2})(00[1-9]|0[1-9]\d|[1-2]\d\d|3[0-5]\d|36[0-6])$",
    "date_pattern_yy_mm_dd": (
        r"(((\d{2})(0[13578]|1[02])(0[1-9]|[12]\d|3[01]))|((\d{2})(0[13456789]|1[012])(0[1-9]|[12]\d|30))|((\d{2})02(0[1-9]|1\d|2[0-8]))|(((0[048]|[2468][048]|[13579][26]))0229))"
    ),
    "date_pattern_yy_mm_dd_zeros": (
        r"(((\d{2})(0[13578]|1[02])(0\d|[12]\d|3[01]))|((\d{2})(0[13456789]|1[012])(0\d|[12]\d|30))|((\d{2})02(0\d|1\d|2[0-8]))|(((0[048]|[2468][048]|[13579][26]))0229))"
    ),
    "date_pattern_yy_ww": r"\d{2}((0[1-9])|([1-4]\d)|(5[0-3]))",
    "date_pattern_yyyy_mm_dd": (
        r"(\d{4}[-/]?((0[13-9]|1[012])[-/]?(0[1-9]|[12]\d|30)|(0[13578]|1[02])[-/]?31|02[-/]?(0[1-9]|1\d|2[0-8]))|(\d{2}(([2468][048]|[02468][48])|[13579][26])|([13579][26]|[02468][048]|0\d|1[0-6])00)[-/]?02[-/]?29)"
    ),
    "date_pattern_yyyy_mm_dd_hh_mm": (
        r"(?:(?:(?:(?:(?:[13579][26]|[2468][048])00)|(?:\d{2}(?:(?:[13579][26])|(?:[2468][048]|0[48]))))(?:(?:(?:09|04|06|11)(?:0[1-9]|1\d|2\d|30))|(?:(?:01|03|05|07|08|10|12)(?:0[1-9]|1\d|2\d|3[01]))|(?:02(?:0[1-9]|1\d|2\d))))|(?:\d{4}(?:(?:(?:09|04|06|11)(?:0[1-9]|1\d|2\d|30))|(?:(?:01|03|05|07|08|10|12)(?:0[1-9]|1\d|2\d|3[01]))|(?:02(?:[01]\d|2[0-8])))))(?:0\d|1\d|2[0-3])(?:[0-5]\d)"
    ),
    "alphanumeric01_unbound": r"[0-9A-Z]+",
    "alphanumeric_with_plus01_unbound": r"[0-9A-Z+]+",
    "invariant_no_plus01_unbound_plus": r"""[-!"%&'()*,./0-9:;<=>?A-Z_a-z]+""",
    "numeric_plus01_unbound": r"[0-9+]+",
    "latitude_longitude_attitude": r"-?\d{1,2}(.\d{1,5})?/-?\d{1,3}(.\d{1,5})?/-?\d{1,4}",
    "yes_no_letter": r"[YN]",
    "hibcc_plus": r"^\+$",
    "iccbba_ampersand": r"^\&$",
    "iccbba_equal": r"^\=$",
    "gs1_function1": r"^\x1D$",
    "iso_iec15434_preamble": r"^\[\)>\x1E",
    "ifa_abdata_pzn_hyphen": r"^\-$",
    "eurocode_ibls_exclamation_mark": r"^\!$",
    "dangerous_cargo_class": r"^\d(.\d[A-Z]?)?$",
    "vessel_registration_number": r"^IMO\d{7}$",
    "electronic_seal_numbers": r"^.{6}$",
    "surety_number": r"^.{6}$",
    "foreign_port_of_lading": r"^.{6}$",
    "format_mm_yy": r"^((0[1-9])|(1[0-2]))\d{2}$",
    "event_date_and_time": (
        r"^(?:(?:(?:(?:(?:[13579][26]|[2468][048])00)|(?:\d{2}(?:(?:[13579][26])|(?:[2468][048]|0[48]))))(?:(?:(?:09|04|06|11)(?:0[1-9]|1\d|2\d|30))|(?:(?:01|03|05|07|08|10|12)(?:0[1-9]|1\d|2\d|3[01]))|(?:02(?:0[1-9]|1\d|2\d))))|(?:\d{4}(?:(?:(?:09|04|06|11)(?:0[1-9]|1\d|2\d|30))|(?:(?:01|03|05|07|08|10|12)(?:0[1-9]|1\d|2\d|3[01]))|(?:02(?:[01]\d|2[0-8])))))(?:0\d|1\d|2[0-3])(?:[0-5]\d)\d{1,3}$"
    ),
    "format_yyyy_ww": r"^([1-2]\d)(\d\d)(0[1-9]|[1-4]\d|5[0-3])$",
    "oldest_and_newest_manufacturing_date": (
        r"^\d{2}((0[1-9])|([1-4]\d)|(5[0-3]))\d{2}((0[1-9])|([1-4]\d)|(5[0-3]))$"
    ),
    "harvest_date_range": (
        r"^(\d{4}[-/]?((0[13-9]|1[012])[-/]?(0[1-9]|[12]\d|30)|(0[13578]|1[02])[-/]?31|02[-/]?(0[1-9]|1\d|2[0-8]))|(\d{2}(([2468][048]|[02468][48])|[13579][26])|([13579][26]|[02468][048]|0\d|1[0-6])00)[-/]?02[-/]?29)(\d{4}[-/]?((0[13-9]|1[012])[-/]?(0[1-9]|[12]\d|30)|(0[13578]|1[02])[-/]?31|02[-/]?(0[1-9]|1\d|2[0-8]))|(\d{2}(([2468][048]|[02468][48])|[13579][26])|([13579][26]|[02468][048]|0\d|1[0-6])00)[-/]?02[-/]?29)$"
    ),
    "uniform_resource_locator": (
        r"^(?:(?:http|https|ftp|telnet|gopher|ms\-help|file|notes)://)?(?:(?:[a-z][\w~%!&',;=\-\.$\(\)\*\+]*):.*@)?(?:(?:[a-z0-9][\w\-]*[a-z0-9]*\.)*(?:(?:(?:(?:[a-z0-9][\w\-]*[a-z0-9]*)(?:\.[a-z0-9]+)?)|(?:(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)))(?::[0-9]+)?))?(?:(?:(?:/(?:[\w`~!$=;\-\+\.\^\(\)\|\{\}\[\]]|(?:%\d\d))+)*/(?:[\w`~!$=;\-\+\.\^\(\)\|\{\}\[\]]|(?:%\d\d))*)(?:\?[^#]+)?(?:#[a-z0-9]\w*)?)?$"
    ),
    "alphanumeric_cage_sn": r"[0-9A-Z/-]{6,25}",
    "alphanumeric2": r"[0-9A-Z]{2}",
    "alphanumeric3": r"[0-9A-Z]{3}",
    "alphanumeric4": r"[0-9A-Z]{4}",
    "alphanumeric5": r"[0-9A-Z]{5}",
    "alphanumeric6": r"[0-9A-Z]{6}",
    "alphanumeric10": r"[0-9A-Z]{10}",
    "alphanumeric12": r"[0-9A-Z]{12}",
    "alphanumeric18": r"[0-9A-Z]{18}",
    "alphanumeric0103": r"[0-9A-Z]{1,3}",
    "alphanumeric0109": r"[0-9A-Z]{1,9}",
    "alphanumeric0110": r"[0-9A-Z]{1,10}",
    "alphanumeric0120": r"[0-9A-Z]{1,20}",
    "alphanumeric0135": r"[0-9A-Z]{1,35}",
    "alphanumeric0150": r"[0-9A-Z]{1,50}",
    "alphanumeric01100": r"[0-9A-Z]{1,100}",
    "alphanumeric0230": r"[0-9A-Z]{2,30}",
    "alphanumeric0235": r"[0-9A-Z]{2,35}",
    "alphanumeric0309": r"[0-9A-Z]{3,9}",
    "alphanumeric0322": r"[0-9A-Z]{3,22}",
    "alphanumeric0335": r"[0-9A-Z]{3,35}",
    "alphanumeric0411": r"[0-9A-Z]{4,11}",
    "alphanumeric0425": r"[0-9A-Z]{4,25}",
    "alphanumeric0529": r"[0-9A-Z]{5,29}",
    "alphanumeric0516": r"[0-9A-Z]{5,16}",
    "alphanumeric0522": r"[0-9A-Z]{5,22}",
    "alphanumeric0635": r"[0-9A-Z]{6,35}",
    "alphanumeric1012": r"[0-9A-Z]{10,12}",
    "alphanumeric1015": r"[0-9A-Z]{10,15}",
    "alphanumeric1315": r"[0-9A-Z]{13,15}",
    "alphanumeric1626": r"[0-9A-Z]{16,26}",
    "alphanumeric04_alphanumeric0110": r"[0-9A-Z]{4}.[0-9A-Z]{1,10}",
    "alphanumeric0132_alphanumeric03_with_dashes": (
        r"[0-9A-Z]{1,32}([0-9A-Z]{3}|-[0-9A-Z]{2}|--[0-9A-Z]{1}|---)"
    ),
    "alphanumeric11_numeric02": r"[0-9A-Z]{11}\d{2}$",
    "numeric02_alphanumeric_dash0106_numeric_dot05_alphanumeric02": (
        r"\d{2}[A-Z0-9-]{1,6}[0-9.]{5}[0-9A-Z]{2}$"
    ),
    "alphanumeric0335_alpha0103": r"[0-9A-Z]{3,35}\+[A-Z]{1,3}$",
    "alpha02_alphanumeric0327": r"[A-Z]{2}[0-9A-Z]{3,27}$",
    "alpha03_numeric14_alphanumeric0133": r"[A-Z]{3}\d{14}[0-9A-Za-z*+-./()!]{1,33}$",
    "alpha01_numeric04_alphanumeric0520": r"[A-Z]{1}\d{4}[0-9A-Z]{5,20}$",
    "numeric0108_alphanumeric02": r"\d{1,8}[0-9A-Z]{2}$",
    "numeric0110_alphanumeric03": r"\d{1,10}[0-9A-Z]{3}$",
    "numeric02_alphanumeric0342": r"\d{2}[0-9A-Z]{3,42}$",
    "alpha02_alphanumeric0318": r"[A-Z]{2}[0-9A-Z]{3,18}$",
    "alphanumeric_space0160": r"[0-9A-Z ]{1,60}$",
    "alphanumeric_plus0150": r"[0-9A-Z ]{1,50}$",
    "alphanumeric_plus2050": r"[0-9A-Z+]{20,50}$",
    "alphanumeric_plus0160": r"[0-9A-Z ]{1,60}$",
    "alpha04_numeric07": r"[A-Z]{4}\d{7}$",
    "alpha04_numeric0103": r"[A-Z]{4}\d{1,3}$",
    "alpha03_numeric03": r"[A-Z]{3}\d{3}$",
    "alpha02": r"[A-Z]{2}$",
    "invariant0212": r"""[-!"%&'()*+,./0-9:;<=>?A-Z_a-z]{2,12}$""",
    "alpha02_invariant0327": r"""[A-Z]{2}[-!"%&'()*+,./0-9:;<=>?A-Z_a-z]{3,27}$""",
    "numeric01": r"\d{1}$",
    "numeric05": r"\d{5}$",
    "numeric09": r"\d{9}$",
    "numeric14": r"\d{14}$",
    "numeric18": r"\d{18}$",
    "numeric0102": r"\d{1,2}$",
    "numeric0406": r"\d{4,6}$",
    "numeric0626": r"\d{6,26}$",
    "numeric0712": r"\d{7,12}$",
    "numeric0913": r"\d{9,13}$",
    "numeric1012": r"\d{10,12}$",
    "numeric1314": r"\d{13,14}$",
    "numeric1426": r"\d{14,26}$",
    "numeric_dot0110": r"[0-9.]{1,10}$",
    "numeric_dot0120": r"[0-9.]{1,20}$",
    "numeric_dot0105": r"[0-9.]{1,5}$",
    "numeric_dot0106": r"[0-9.]{1,6}$",
    "minus_numeric0104": r"-?\d{1,4}$",
}
