"""Constant catalogs shared by every media type."""
from __future__ import annotations

from enum import Enum


class ContributorKind(str, Enum):
    """Sub-kinds of contributor entities attached to media records."""

    ACTOR = "actor"
    DIRECTOR = "director"
    PRODUCER = "producer"
    AUTHOR = "author"
    ILLUSTRATOR = "illustrator"
    SINGER = "singer"
    DEVELOPER = "developer"
    PUBLISHER = "publisher"
    LABEL_RECORDS = "label_records"

    @property
    def is_person(self) -> bool:
        """People key on first and last name, companies on their name."""

        return self in PERSON_KINDS


PERSON_KINDS = frozenset(
    {
        ContributorKind.ACTOR,
        ContributorKind.DIRECTOR,
        ContributorKind.PRODUCER,
        ContributorKind.AUTHOR,
        ContributorKind.ILLUSTRATOR,
        ContributorKind.SINGER,
    }
)


class MediaSupport(str, Enum):
    """Physical or digital support a media item is available on."""

    VIDEO_TAPE = "Video Tape"
    DVD = "DVD"
    BLU_RAY = "Blu Ray"
    PAPER = "Paper"
    AUDIO_TAPE = "Audio Tape"
    VINYL = "Vinyl"
    CD = "CD"
    ROM_CARTRIDGE = "ROM Cartridge"
    DIGITAL = "Digital"


class BookFormat(str, Enum):
    CLASSICAL = "Classical"
    POCKET = "Pocket"
    UNSPECIFIED = "Unspecified"


class VideoGenre(str, Enum):
    """Genres available to movies, series, animes and cartoons."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    BIOPIC = "Biopic"
    BUDDY_COP = "Buddy Cop"
    COMEDY = "Comedy"
    COP = "Cop"
    CRIME = "Crime"
    CYBERPUNK = "Cyberpunk"
    DISASTER = "Disaster"
    DRAMA = "Drama"
    DYSTOPIAN = "Dystopian"
    EPIC = "Epic"
    FAMILY = "Family"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    HEROIC_FANTASY = "Heroic Fantasy"
    HISTORICAL = "Historical"
    MAGICAL_GIRL = "Magical Girl"
    MARTIAL_ART = "Martial Art"
    MECHA = "Mecha"
    MONSTER = "Monster"
    MUSICAL = "Musical"
    MYSTERY = "Mystery"
    ROMANTIC = "Romantic"
    SCIENCE_FICTION = "Science Fiction"
    SPACE_OPERA = "Space Opera"
    SPAGHETTI_WESTERN = "Spaghetti Western"
    SPORT = "Sport"
    SPY = "Spy"
    SUPERHERO = "Superhero"
    SUPERNATURAL = "Supernatural"
    TECHNICAL = "Technical"
    TEEN = "Teen"
    TOKUSATSU = "Tokusatsu"
    THEATER = "Theater"
    THRILLER = "Thriller"
    WAR = "War"
    WESTERN = "Western"


class BookGenre(str, Enum):
    """Genres available to books and comics."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    BIOPIC = "Biopic"
    COMEDY = "Comedy"
    COP = "Cop"
    CRIME = "Crime"
    CYBERPUNK = "Cyberpunk"
    DISASTER = "Disaster"
    DRAMA = "Drama"
    DYSTOPIAN = "Dystopian"
    EPIC = "Epic"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    HEROIC_FANTASY = "Heroic Fantasy"
    HISTORICAL = "Historical"
    MAGICAL_GIRL = "Magical Girl"
    MARTIAL_ART = "Martial Art"
    MECHA = "Mecha"
    MONSTER = "Monster"
    MUSICAL = "Musical"
    MYSTERY = "Mystery"
    ROMANTIC = "Romantic"
    SCIENCE_FICTION = "Science Fiction"
    SPACE_OPERA = "Space Opera"
    SPAGHETTI_WESTERN = "Spaghetti Western"
    SPORT = "Sport"
    SPY = "Spy"
    SUPERHERO = "Superhero"
    SUPERNATURAL = "Supernatural"
    TECHNICAL = "Technical"
    TEEN = "Teen"
    THEATER = "Theater"
    THRILLER = "Thriller"
    WAR = "War"
    WESTERN = "Western"


class MusicGenre(str, Enum):
    ALTERNATIVE_METAL = "Alternative Metal"
    ALTERNATIVE_ROCK = "Alternative Rock"
    BALLAD = "Ballad"
    BLUE_EYED_SOUL = "Blue-eyed Soul"
    BLUES = "Blues"
    BLUES_ROCK = "Blues Rock"
    CLASSIC = "Classic"
    CELTIC = "Celtic"
    COUNTRY = "Country"
    DANCE = "Dance"
    DANCE_POP = "Dance Pop"
    DISCO = "Disco"
    ELECTRO = "Electro"
    EURODANCE = "Eurodance"
    EUROPOP = "Europop"
    FRENCH_VARIETY = "French Variety"
    FUNK = "Funk"
    JAZZ = "Jazz"
    J_POP = "J-Pop"
    J_ROCK = "J-Rock"
    HARD_ROCK = "Hard Rock"
    HEAVY_METAL = "Heavy Metal"
    HIP_HOP = "Hip Hop"
    HOUSE = "House"
    METAL = "Metal"
    NEW_WAVE = "New Wave"
    OPERA = "Opera"
    ORCHESTRA = "Orchestra"
    OST = "OST"
    POP = "Pop"
    POP_FUNK = "Pop Funk"
    POP_ROCK = "Pop Rock"
    POST_GRUNGE = "Post Grunge"
    POWER_BALLAD = "Power Ballad"
    PROGRESSIVE_ROCK = "Progressive Rock"
    PUNK = "Punk"
    REGGAE = "Reggae"
    REGGAE_FUSION = "Reggae Fusion"
    RAP = "Rap"
    RAP_CELTIC = "Celtic Rap"
    ROCK = "Rock"
    ROCK_N_ROLL = "Rock n Roll"
    RNB = "RnB"
    SKA = "Ska"
    SOUL = "Soul"
    SOUTHERN_ROCK = "Southern Rock"
    SYNTHPOP = "Synthpop"
    TECHNO = "Techno"
    ZOUK = "Zouk"


class VideoGameGenre(str, Enum):
    ACTION = "Action"
    ACTION_RPG = "Action RPG"
    BEAT_EM_ALL = "Beat em All"
    BEAT_EM_UP = "Beat em Up"
    RACING = "Racing"
    FPS = "FPS"
    IDLE = "Idle"
    MANAGEMENT = "Management"
    PLATFORM = "Platform"
    PUZZLE = "Puzzle Game"
    ROGUE_LIKE = "Rogue Like"
    RPG = "RPG"
    RTS = "RTS"
    SANDBOX = "Sandbox"
    SHOOTER = "Shooter"
    SPORT = "Sport"
    SURVIVAL_HORROR = "Survival Horror"
    TACTICAL_RPG = "Tactical RPG"
    TPS = "TPS"
    VERSUS_FIGHTING = "Versus Fighting"


class VideoGamePlatform(str, Enum):
    """Platforms a video game can be released on."""

    NES = "NES"
    SNES = "SNES"
    N64 = "N64"
    GAMECUBE = "GameCube"
    WII = "Wii"
    WII_U = "Wii U"
    GAMEBOY = "Game Boy"
    GAMEBOY_ADVANCE = "Game Boy Advance"
    NINTENDO_DS = "Nintendo DS"
    NINTENDO_3DS = "Nintendo 3DS"
    MEGA_DRIVE = "Mega Drive"
    SEGA_SATURN = "Saturn"
    DREAMCAST = "Dreamcast"
    PSX = "PlayStation"
    PS2 = "PlayStation 2"
    PS3 = "PlayStation 3"
    PS4 = "PlayStation 4"
    PSP = "PlayStation Portable"
    XBOX = "Xbox"
    XBOX_360 = "Xbox 360"
    XBOX_ONE = "Xbox One"
    PC = "PC"


def catalog_values(catalog: type[Enum]) -> list[str]:
    """Return the display values of an enum catalog in declaration order."""

    return [member.value for member in catalog]
