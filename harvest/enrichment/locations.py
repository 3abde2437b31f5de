"""
Location normalization to a known Indian city (or "Remote").
"""

import re
from typing import Optional, Tuple

DEFAULT_LOCATION = "India"

# Checked in order; the first city contained in the location wins.
KNOWN_CITIES: Tuple[str, ...] = (
    "Mumbai", "Bangalore", "Delhi", "Hyderabad", "Chennai", "Pune", "Gurgaon", "Noida",
    "Kolkata", "Ahmedabad", "Jaipur", "Chandigarh", "Indore", "Lucknow", "Coimbatore", "Nagpur",
    "Surat", "Visakhapatnam", "Bhopal", "Patna", "Vadodara", "Ghaziabad", "Ludhiana", "Agra",
    "Nashik", "Faridabad", "Meerut", "Rajkot", "Kalyan", "Vasai", "Varanasi", "Srinagar", "Aurangabad",
    "Dhanbad", "Amritsar", "Navi Mumbai", "Allahabad", "Ranchi", "Howrah", "Jabalpur", "Gwalior",
    "Vijayawada", "Jodhpur", "Madurai", "Raipur", "Kota", "Guwahati", "Chandrapur", "Solapur",
    "Remote", "Kanpur", "Trichy", "Mysore", "Thrissur", "Jamshedpur", "Udaipur", "Dehradun",
    "Hubli", "Dharwad", "Nellore", "Thane", "Panaji", "Shimla", "Mangalore", "Bareilly", "Salem",
    "Aligarh", "Bhavnagar", "Kolhapur", "Ajmer", "Belgaum", "Tirupati", "Rourkela", "Bilaspur",
    "Anantapur", "Silchar", "Kochi", "Thiruvananthapuram", "Bhubaneswar", "Imphal", "Shillong",
    "Aizawl", "Itanagar", "Kohima", "Gangtok", "Patiala", "Jammu", "Shimoga", "Muzaffarpur", "Gandhinagar",
)

# Alternate and historical spellings folded onto the KNOWN_CITIES spelling.
LOCATION_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("bengaluru", "bangalore"),
    ("bangaluru", "bangalore"),
    ("bengalore", "bangalore"),
    ("gurugram", "gurgaon"),
    ("bombay", "mumbai"),
    ("madras", "chennai"),
    ("calcutta", "kolkata"),
    ("trivandrum", "thiruvananthapuram"),
    ("cochin", "kochi"),
    ("ernakulam", "kochi"),
    ("mysuru", "mysore"),
    ("mangaluru", "mangalore"),
    ("belagavi", "belgaum"),
    ("hubballi", "hubli"),
    ("vizag", "visakhapatnam"),
    ("prayagraj", "allahabad"),
    ("tiruchirappalli", "trichy"),
    ("shivamogga", "shimoga"),
    ("panjim", "panaji"),
    ("secunderabad", "hyderabad"),
    ("work from home", "remote"),
    ("wfh", "remote"),
    ("anywhere in india", "remote"),
)

_ALIAS_PATTERNS = tuple(
    (re.compile(rf"\b{re.escape(alias)}\b"), target) for alias, target in LOCATION_ALIASES
)


def normalize_location(location: Optional[str]) -> str:
    """
    Map free-text location to a KNOWN_CITIES entry, or DEFAULT_LOCATION when
    nothing matches.
    """
    if not location or not isinstance(location, str):
        return DEFAULT_LOCATION

    lowered = location.strip().lower()
    if not lowered or lowered == "not specified":
        return DEFAULT_LOCATION

    for pattern, target in _ALIAS_PATTERNS:
        lowered = pattern.sub(target, lowered)

    for city in KNOWN_CITIES:
        if city.lower() in lowered:
            return city

    return DEFAULT_LOCATION
