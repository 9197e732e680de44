"""Tag vocabulary shared by profiles and generated events."""

from __future__ import annotations

from enum import Enum


class TagCategory(Enum):
    """Categories grouping tags; the value is the document field name."""

    MUSIC = ("music_tags", "Music")
    SPORT = ("sport_tags", "Sport")
    FOOD = ("food_tags", "Food")
    ART = ("art_tags", "Art")
    TRAVEL = ("travel_tags", "Travel")
    GAMES = ("games_tags", "Games")
    TECHNOLOGY = ("technology_tags", "Technology")
    TOPIC = ("topic_tags", "Topic")

    def __init__(self, field_name: str, display_name: str) -> None:
        self.field_name = field_name
        self.display_name = display_name


class Tag(Enum):
    """A tag with a user-facing ``display_name`` and a :class:`TagCategory`."""

    JAZZ = ("Jazz", TagCategory.MUSIC)
    POP = ("Pop", TagCategory.MUSIC)
    ROCK = ("Rock", TagCategory.MUSIC)
    RAP = ("Rap", TagCategory.MUSIC)
    CLASSICAL = ("Classical", TagCategory.MUSIC)
    BLUES = ("Blues", TagCategory.MUSIC)
    METAL = ("Metal", TagCategory.MUSIC)
    RNB = ("R&B", TagCategory.MUSIC)
    FUNK = ("Funk", TagCategory.MUSIC)
    REGGAE = ("Reggae", TagCategory.MUSIC)
    ELECTRONIC = ("Electronic", TagCategory.MUSIC)
    COUNTRY = ("Country", TagCategory.MUSIC)
    INDIE = ("Indie", TagCategory.MUSIC)
    PUNK = ("Punk", TagCategory.MUSIC)
    K_POP = ("K-pop", TagCategory.MUSIC)
    LIVE_MUSIC = ("Live music", TagCategory.MUSIC)
    CONCERT = ("Concert", TagCategory.MUSIC)
    DJ_SET = ("DJ set", TagCategory.MUSIC)
    OPEN_MIC = ("Open mic", TagCategory.MUSIC)
    KARAOKE = ("Karaoke", TagCategory.MUSIC)
    RUNNING = ("Running", TagCategory.SPORT)
    FITNESS = ("Fitness", TagCategory.SPORT)
    SWIMMING = ("Swimming", TagCategory.SPORT)
    CYCLING = ("Cycling", TagCategory.SPORT)
    MOUNTAIN_BIKING = ("Mountain biking", TagCategory.SPORT)
    HIKING = ("Hiking", TagCategory.SPORT)
    YOGA = ("Yoga", TagCategory.SPORT)
    MEDITATION = ("Meditation", TagCategory.SPORT)
    PILATES = ("Pilates", TagCategory.SPORT)
    JUDO = ("Judo", TagCategory.SPORT)
    KARATE = ("Karate", TagCategory.SPORT)
    BOXING = ("Boxing", TagCategory.SPORT)
    FOOTBALL = ("Football", TagCategory.SPORT)
    BASKETBALL = ("Basketball", TagCategory.SPORT)
    VOLLEYBALL = ("Volleyball", TagCategory.SPORT)
    RUGBY = ("Rugby", TagCategory.SPORT)
    HANDBALL = ("Handball", TagCategory.SPORT)
    TENNIS = ("Tennis", TagCategory.SPORT)
    BADMINTON = ("Badminton", TagCategory.SPORT)
    TABLE_TENNIS = ("Table tennis", TagCategory.SPORT)
    SKIING = ("Skiing", TagCategory.SPORT)
    SNOWBOARDING = ("Snowboarding", TagCategory.SPORT)
    SKATING = ("Skating", TagCategory.SPORT)
    SURFING = ("Surfing", TagCategory.SPORT)
    GOLF = ("Golf", TagCategory.SPORT)
    KAYAKING = ("Kayaking", TagCategory.SPORT)
    DANCING = ("Dancing", TagCategory.SPORT)
    HORSEBACK_RIDING = ("Horseback riding", TagCategory.SPORT)
    VEGAN = ("Vegan", TagCategory.FOOD)
    VEGETARIAN = ("Vegetarian", TagCategory.FOOD)
    HALAL = ("Halal", TagCategory.FOOD)
    ITALIAN = ("Italian", TagCategory.FOOD)
    ASIAN = ("Asian", TagCategory.FOOD)
    INDIAN = ("Indian", TagCategory.FOOD)
    MEXICAN = ("Mexican", TagCategory.FOOD)
    LEBANESE = ("Lebanese", TagCategory.FOOD)
    MEDITERRANEAN = ("Mediterranean", TagCategory.FOOD)
    FAST_FOOD = ("Fast food", TagCategory.FOOD)
    DESSERTS = ("Desserts", TagCategory.FOOD)
    GRILLING = ("Grilling", TagCategory.FOOD)
    HOME_COOKING = ("Home cooking", TagCategory.FOOD)
    STREET_FOOD = ("Street food", TagCategory.FOOD)
    CAFES = ("Cafés", TagCategory.FOOD)
    WINE_TASTING = ("Wine tasting", TagCategory.FOOD)
    BEER_TASTING = ("Beer tasting", TagCategory.FOOD)
    COCKTAILS = ("Cocktails", TagCategory.FOOD)
    BARS = ("Bars", TagCategory.FOOD)
    BRUNCH = ("Brunch", TagCategory.FOOD)
    BAKING = ("Baking", TagCategory.FOOD)
    COOKING_CLASS = ("Cooking class", TagCategory.FOOD)
    FOOD_TRUCKS = ("Food trucks", TagCategory.FOOD)
    FARMERS_MARKET = ("Farmers market", TagCategory.FOOD)
    FINE_DINING = ("Fine dining", TagCategory.FOOD)
    POTLUCK = ("Potluck", TagCategory.FOOD)
    DRAWING = ("Drawing", TagCategory.ART)
    PAINTING = ("Painting", TagCategory.ART)
    GRAFFITI = ("Graffiti", TagCategory.ART)
    PHOTOGRAPHY = ("Photography", TagCategory.ART)
    SCULPTURE = ("Sculpture", TagCategory.ART)
    MUSIC = ("Music", TagCategory.ART)
    THEATER = ("Theater", TagCategory.ART)
    CINEMA = ("Cinema", TagCategory.ART)
    DOCUMENTARIES = ("Documentaries", TagCategory.ART)
    ANIMATION = ("Animation", TagCategory.ART)
    POETRY = ("Poetry", TagCategory.ART)
    LITERATURE = ("Literature", TagCategory.ART)
    FASHION = ("Fashion", TagCategory.ART)
    ARCHITECTURE = ("Architecture", TagCategory.ART)
    DESIGN = ("Design", TagCategory.ART)
    UI_UX = ("UI/UX", TagCategory.ART)
    DIGITAL_ART = ("Digital art", TagCategory.ART)
    COMEDY = ("Comedy", TagCategory.ART)
    STAND_UP = ("Stand up", TagCategory.ART)
    CRAFTS = ("Crafts", TagCategory.ART)
    POTTERY = ("Pottery", TagCategory.ART)
    KNITTING = ("Knitting", TagCategory.ART)
    WOODWORKING = ("Woodworking", TagCategory.ART)
    MUSEUMS = ("Museums", TagCategory.ART)
    GALLERIES = ("Galleries", TagCategory.ART)
    WRITING = ("Writing", TagCategory.ART)
    FESTIVALS = ("Festivals", TagCategory.TRAVEL)
    CAMPING = ("Camping", TagCategory.TRAVEL)
    BEACH = ("Beach", TagCategory.TRAVEL)
    CITY_TRIPS = ("City trips", TagCategory.TRAVEL)
    ROAD_TRIPS = ("Road trips", TagCategory.TRAVEL)
    SAFARI = ("Safari", TagCategory.TRAVEL)
    BACKPACKING = ("Backpacking", TagCategory.TRAVEL)
    ADVENTURE_TRAVEL = ("Adventure travel", TagCategory.TRAVEL)
    WELLNESS_RETREATS = ("Wellness retreats", TagCategory.TRAVEL)
    CULTURAL_TRIPS = ("Cultural trips", TagCategory.TRAVEL)
    SOLO_TRAVEL = ("Solo travel", TagCategory.TRAVEL)
    GROUP_TRAVEL = ("Group travel", TagCategory.TRAVEL)
    BUDGET_TRAVEL = ("Budget travel", TagCategory.TRAVEL)
    LUXURY_TRAVEL = ("Luxury travel", TagCategory.TRAVEL)
    VOLUNTEER_TRAVEL = ("Volunteer travel", TagCategory.TRAVEL)
    CRUISES = ("Cruises", TagCategory.TRAVEL)
    NATIONAL_PARKS = ("National parks", TagCategory.TRAVEL)
    STAYCATION = ("Staycation", TagCategory.TRAVEL)
    WEEKEND_TRIPS = ("Weekend trips", TagCategory.TRAVEL)
    VIDEO_GAMES = ("Video games", TagCategory.GAMES)
    BOARD_GAMES = ("Board games", TagCategory.GAMES)
    CARD_GAMES = ("Card games", TagCategory.GAMES)
    DND = ("DnD", TagCategory.GAMES)
    PUZZLE = ("Puzzle", TagCategory.GAMES)
    BRAIN_GAMES = ("Brain games", TagCategory.GAMES)
    ONLINE_GAMES = ("Online games", TagCategory.GAMES)
    CO_OP_GAMES = ("Co-op games", TagCategory.GAMES)
    CHESS = ("Chess", TagCategory.GAMES)
    PROGRAMMING = ("Programming", TagCategory.TECHNOLOGY)
    AI = ("AI", TagCategory.TECHNOLOGY)
    MACHINE_LEARNING = ("Machine learning", TagCategory.TECHNOLOGY)
    DATA_SCIENCE = ("Data science", TagCategory.TECHNOLOGY)
    CONSOLES = ("Consoles", TagCategory.TECHNOLOGY)
    CRYPTOCURRENCY = ("Cryptocurrency", TagCategory.TECHNOLOGY)
    CYBERSECURITY = ("Cybersecurity", TagCategory.TECHNOLOGY)
    VR = ("VR", TagCategory.TECHNOLOGY)
    ROBOTICS = ("Robotics", TagCategory.TECHNOLOGY)
    CLOUD_COMPUTING = ("Cloud computing", TagCategory.TECHNOLOGY)
    TECH_NEWS = ("Tech news", TagCategory.TECHNOLOGY)
    STARTUP = ("Startup", TagCategory.TECHNOLOGY)
    PHYSICS = ("Physics", TagCategory.TOPIC)
    MATHEMATICS = ("Mathematics", TagCategory.TOPIC)
    CHEMISTRY = ("Chemistry", TagCategory.TOPIC)
    ASTRONOMY = ("Astronomy", TagCategory.TOPIC)
    BIOLOGY = ("Biology", TagCategory.TOPIC)
    HISTORY = ("History", TagCategory.TOPIC)
    PHILOSOPHY = ("Philosophy", TagCategory.TOPIC)
    COMPUTER_SCIENCE = ("Computer science", TagCategory.TOPIC)
    ECOLOGY = ("Ecology", TagCategory.TOPIC)
    POLITICS = ("Politics", TagCategory.TOPIC)
    ECONOMICS = ("Economics", TagCategory.TOPIC)
    SOCIOLOGY = ("Sociology", TagCategory.TOPIC)

    def __init__(self, display_name: str, category: TagCategory) -> None:
        self.display_name = display_name
        self.category = category

    @classmethod
    def from_display_name(cls, display_name: str) -> Tag | None:
        """Return the tag whose display name is *display_name*, or ``None``."""
        return _BY_DISPLAY_NAME.get(display_name)

    @classmethod
    def for_category(cls, category: TagCategory) -> list[Tag]:
        return [tag for tag in cls if tag.category is category]


_BY_DISPLAY_NAME: dict[str, Tag] = {tag.display_name: tag for tag in Tag}

__all__ = ["Tag", "TagCategory"]
