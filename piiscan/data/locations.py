"""
World Locations Gazetteer

A curated set of countries, US states and major world cities used for
LOCATION detection and for the "known location" signal of the proper-noun
scorer. Entries are lowercase; lookups are case-insensitive.

Names that are far more common as given names or English words than as
places (e.g. "Jordan", "Austin", "Sydney", "Reading", "Nice") are left out on purpose.

Usage:
    from piiscan.data.locations import get_location_gazetteer
    gazetteer = get_location_gazetteer()
    gazetteer.is_known_location("Tokyo")          # True
    gazetteer.is_known_location("United States")  # True
"""
from typing import Dict, Optional, Set


# ============================================================================
# Countries
# ============================================================================
COUNTRIES = {
    "afghanistan", "albania", "algeria", "argentina", "armenia", "australia",
    "austria", "azerbaijan", "bahamas", "bahrain", "bangladesh", "belarus",
    "belgium", "bolivia", "bosnia", "botswana", "brazil", "bulgaria",
    "cambodia", "cameroon", "canada", "chile", "china", "colombia",
    "costa rica", "croatia", "cuba", "cyprus", "czech republic", "czechia",
    "denmark", "dominican republic", "ecuador", "egypt", "el salvador",
    "estonia", "ethiopia", "fiji", "finland", "france", "germany", "ghana",
    "greece", "guatemala", "haiti", "honduras", "hong kong", "hungary",
    "iceland", "india", "indonesia", "iran", "iraq", "ireland", "israel",
    "italy", "jamaica", "japan", "kazakhstan", "kenya", "kuwait", "laos",
    "latvia", "lebanon", "libya", "lithuania", "luxembourg", "madagascar",
    "malaysia", "maldives", "malta", "mexico", "moldova", "monaco",
    "mongolia", "montenegro", "morocco", "mozambique", "myanmar", "namibia",
    "nepal", "netherlands", "new zealand", "nicaragua", "nigeria",
    "north korea", "norway", "oman", "pakistan", "panama", "paraguay",
    "peru", "philippines", "poland", "portugal", "qatar", "romania",
    "russia", "rwanda", "saudi arabia", "senegal", "serbia", "singapore",
    "slovakia", "slovenia", "somalia", "south africa", "south korea",
    "spain", "sri lanka", "sudan", "sweden", "switzerland", "syria",
    "taiwan", "tanzania", "thailand", "tunisia", "turkey", "uganda",
    "ukraine", "united arab emirates", "united kingdom", "united states",
    "united states of america", "uruguay", "uzbekistan", "venezuela",
    "vietnam", "yemen", "zambia", "zimbabwe",
    "england", "scotland", "wales", "northern ireland", "great britain",
}

# ============================================================================
# US States
# ============================================================================
US_STATES = {
    "alabama", "alaska", "arizona", "arkansas", "california", "colorado",
    "connecticut", "delaware", "florida", "hawaii", "idaho", "illinois",
    "indiana", "iowa", "kansas", "kentucky", "louisiana", "maine",
    "maryland", "massachusetts", "michigan", "minnesota", "mississippi",
    "missouri", "montana", "nebraska", "nevada", "new hampshire",
    "new jersey", "new mexico", "new york", "north carolina", "north dakota",
    "ohio", "oklahoma", "oregon", "pennsylvania", "rhode island",
    "south carolina", "south dakota", "tennessee", "texas", "utah",
    "vermont", "west virginia", "wisconsin",
    "wyoming",
}

# ============================================================================
# Major World Cities
# ============================================================================
CITIES = {
    # North America
    "new york city", "los angeles", "chicago", "houston", "phoenix",
    "philadelphia", "san antonio", "san diego", "dallas", "san jose",
    "jacksonville", "san francisco", "seattle", "denver",
    "boston", "nashville", "detroit", "portland", "las vegas", "baltimore",
    "milwaukee", "albuquerque", "sacramento", "atlanta", "miami", "oakland",
    "minneapolis", "new orleans", "cleveland", "honolulu", "pittsburgh",
    "cincinnati", "orlando", "tampa", "salt lake city", "toronto",
    "montreal", "vancouver", "calgary", "ottawa", "edmonton", "winnipeg",
    "mexico city", "guadalajara", "monterrey", "palo alto", "mountain view",
    "cupertino", "brooklyn", "manhattan",
    # Europe
    "london", "paris", "berlin", "madrid", "rome", "milan", "barcelona",
    "munich", "hamburg", "frankfurt", "vienna", "amsterdam", "rotterdam",
    "brussels", "zurich", "geneva", "stockholm", "oslo", "copenhagen",
    "helsinki", "dublin", "edinburgh", "glasgow", "manchester", "liverpool",
    "lisbon", "porto", "prague", "warsaw", "krakow", "budapest", "athens",
    "istanbul", "moscow", "kyiv", "bucharest", "sofia", "belgrade",
    "zagreb", "naples", "turin", "venice", "lyon", "marseille",
    # Asia
    "tokyo", "osaka", "kyoto", "beijing", "shanghai", "shenzhen",
    "guangzhou", "seoul", "busan", "taipei", "bangkok", "hanoi",
    "ho chi minh city", "kuala lumpur", "jakarta", "manila", "mumbai",
    "delhi", "new delhi", "bangalore", "bengaluru", "chennai", "kolkata",
    "hyderabad", "karachi", "lahore", "dhaka", "dubai", "abu dhabi",
    "doha", "riyadh", "tel aviv", "jerusalem", "tehran", "baghdad",
    # Oceania
    "melbourne", "brisbane", "perth", "adelaide", "auckland",
    "wellington",
    # Latin America
    "sao paulo", "rio de janeiro", "buenos aires", "lima", "bogota",
    "santiago", "caracas", "quito", "havana", "montevideo",
    # Africa
    "cairo", "lagos", "nairobi", "johannesburg", "cape town", "casablanca",
    "accra", "addis ababa", "dakar", "tunis", "algiers",
}

# ============================================================================
# Continents & regions
# ============================================================================
REGIONS = {
    "africa", "antarctica", "asia", "europe", "north america",
    "south america", "oceania", "middle east", "scandinavia",
    "latin america", "caribbean", "siberia", "patagonia",
}

WORLD_LOCATIONS: Set[str] = COUNTRIES | US_STATES | CITIES | REGIONS


class LocationGazetteer:
    """Case-insensitive lookup over WORLD_LOCATIONS (or a custom set)."""

    def __init__(self, locations: Optional[Set[str]] = None):
        source = WORLD_LOCATIONS if locations is None else locations
        self._locations: Set[str] = {loc.lower().strip() for loc in source}

    def __contains__(self, text: str) -> bool:
        return self.is_known_location(text)

    def __len__(self) -> int:
        return len(self._locations)

    def is_known_location(self, text: str) -> bool:
        return " ".join(text.lower().split()) in self._locations

    def stats(self) -> Dict[str, int]:
        return {
            "total": len(self._locations),
            "countries": len(COUNTRIES),
            "us_states": len(US_STATES),
            "cities": len(CITIES),
            "regions": len(REGIONS),
        }


# Global instance for convenience
_gazetteer: Optional[LocationGazetteer] = None


def get_location_gazetteer() -> LocationGazetteer:
    """Get the global location gazetteer instance."""
    global _gazetteer
    if _gazetteer is None:
        _gazetteer = LocationGazetteer()
    return _gazetteer
