from odyssey.domain.entities.location import (
    Coordinates,
    LocationCluster,
    LocationResult,
    MapCenter,
    MapView,
    PopularDestination,
    RecommendedPlace,
    TrendingLocation,
    ZoomDelta,
)
from odyssey.domain.entities.post import AuthorRef, Post, PostLocation
from odyssey.domain.entities.profile import Profile
from odyssey.domain.entities.search import (
    TRAVEL_CATEGORIES,
    SearchFilters,
    SearchHistoryItem,
    SearchResult,
    TravelCategory,
)

__all__ = [
    "AuthorRef",
    "Coordinates",
    "LocationCluster",
    "LocationResult",
    "MapCenter",
    "MapView",
    "PopularDestination",
    "Post",
    "PostLocation",
    "Profile",
    "RecommendedPlace",
    "SearchFilters",
    "SearchHistoryItem",
    "SearchResult",
    "TRAVEL_CATEGORIES",
    "TravelCategory",
    "TrendingLocation",
    "ZoomDelta",
]
