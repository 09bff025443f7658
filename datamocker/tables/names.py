"""Name, middle-name and title tables per region."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from datamocker.errors import DataTableError
from datamocker.types import Region


@dataclass(frozen=True)
class RegionNames:
    """Name tables for one cultural region."""

    male_first: tuple[str, ...]
    female_first: tuple[str, ...]
    last: tuple[str, ...]
    titles: tuple[str, ...]

    def __post_init__(self) -> None:
        for attr in ("male_first", "female_first", "last", "titles"):
            if not getattr(self, attr):
                raise DataTableError(f"Region name table '{attr}' must not be empty")


NIGERIAN = RegionNames(
    male_first=(
        "Chinedu", "Emeka", "Oluwatobi", "Adebayo", "Chukwuemeka", "Obinna", "Ifeanyi",
        "Abdul", "Musa", "Yusuf", "Ibrahim", "Olumide", "Adetokunbo", "Okechukwu", "Nnamdi",
        "Eze", "Tunde", "Kayode", "Femi", "Segun", "Kunle", "Babatunde", "Wale", "Dayo", "Jide",
    ),
    female_first=(
        "Amina", "Fatima", "Zainab", "Chioma", "Ngozi", "Aisha", "Funke", "Blessing", "Grace",
        "Mercy", "Patience", "Esther", "Rahama", "Halima", "Maryam", "Olamide", "Adesuwa", "Efe",
        "Titilayo", "Yewande", "Folake", "Bimpe", "Ronke", "Simisola", "Temilade",
    ),
    last=(
        "Okoro", "Adeyemi", "Okafor", "Ibrahim", "Bello", "Abdullahi", "Ogunlesi", "Nwachukwu",
        "Onyema", "Eze", "Adeleke", "Balogun", "Obi", "Okonkwo", "Uche", "Mohammed", "Sani",
        "Abubakar", "Yakubu", "Ojo", "Adewale", "Oladipo", "Akintola", "Bankole", "Oyinlola",
    ),
    titles=(
        "Chief", "Alhaji", "Dr.", "Engr.", "Prof.", "Barr.", "Pastor", "Imam", "Oba", "Eze",
        "Olori", "Iyaloja", "Alhaja", "Madam", "Sir",
    ),
)

ARABIC = RegionNames(
    male_first=(
        "Mohammed", "Ahmed", "Ali", "Omar", "Youssef", "Mahmoud", "Khalid", "Abdullah",
        "Mustafa", "Ibrahim", "Hamza", "Tariq", "Yahya", "Hassan", "Hussein", "Zaid", "Samir",
        "Naser", "Faisal", "Waleed", "Karim", "Adel", "Rashid", "Salim", "Jamal",
    ),
    female_first=(
        "Aisha", "Fatima", "Layla", "Mariam", "Noor", "Amal", "Huda", "Zahra", "Samira",
        "Farida", "Salma", "Yasmin", "Leila", "Nadia", "Rania", "Dalia", "Hanan", "Jameela",
        "Karima", "Mona", "Nawal", "Rasha", "Sana", "Wafa", "Zain",
    ),
    last=(
        "Al-Saud", "Al-Farsi", "Khan", "Al-Maktoum", "Hassan", "Abbas", "Abdul", "Al-Masri",
        "Al-Qurashi", "Al-Najjar", "Al-Sharif", "Al-Baghdadi", "Al-Hashimi", "Al-Ghamdi",
        "Al-Obeidi", "Al-Zahrani", "Al-Amri", "Al-Shammari", "Al-Qahtani", "Al-Dosari",
        "Al-Harbi", "Al-Juhani", "Al-Sulami", "Al-Yami", "Al-Zahawi",
    ),
    titles=(
        "Sheikh", "Dr.", "Prof.", "Hajji", "Sayyid", "Imam", "Ustadh", "Amir", "Mufti", "Qadi",
        "Hakim", "Ra'is", "Basha", "Effendi", "Mawlana",
    ),
)

WESTERN = RegionNames(
    male_first=(
        "John", "Michael", "David", "James", "Robert", "William", "Richard", "Joseph", "Thomas",
        "Charles", "Christopher", "Daniel", "Matthew", "Anthony", "Donald", "Mark", "Paul",
        "Steven", "Andrew", "Kenneth", "George", "Joshua", "Kevin", "Brian", "Edward",
    ),
    female_first=(
        "Mary", "Jennifer", "Lisa", "Sarah", "Emily", "Jessica", "Amanda", "Melissa", "Nicole",
        "Elizabeth", "Michelle", "Ashley", "Stephanie", "Rebecca", "Laura", "Kimberly", "Amber",
        "Rachel", "Heather", "Danielle", "Christina", "Tiffany", "Samantha", "Katherine",
        "Victoria",
    ),
    last=(
        "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Garcia",
        "Rodriguez", "Wilson", "Martinez", "Anderson", "Taylor", "Thomas", "Hernandez", "Moore",
        "Martin", "Jackson", "Thompson", "White", "Lopez", "Lee", "Gonzalez", "Harris", "Clark",
    ),
    titles=(
        "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Rev.", "Hon.", "Sen.", "Gov.", "Pres.", "Capt.",
        "Col.", "Gen.", "Judge", "Sir",
    ),
)

# Chinese, Japanese, Korean, Indian and Vietnamese names
ASIAN = RegionNames(
    male_first=(
        "Wei", "Jian", "Min", "Hao", "Yong", "Takeshi", "Hiroshi", "Kenji", "Ryota", "Daichi",
        "Min-ho", "Ji-hoon", "Seung", "Joon", "Hyun", "Raj", "Aarav", "Vihaan", "Arjun",
        "Aditya", "Chen", "Li", "Zhang", "Wang",
    ),
    female_first=(
        "Mei", "Ling", "Xia", "Yan", "Li", "Hana", "Yui", "Sakura", "Aoi", "Rin", "Ji-woo",
        "Seo-yeon", "Min-ji", "Hye-jin", "Eun-ji", "Priya", "Ananya", "Diya", "Aanya", "Ishita",
        "Ying", "Fang", "Jing", "Lan", "Xiu",
    ),
    last=(
        "Wang", "Li", "Zhang", "Liu", "Chen", "Tanaka", "Sato", "Suzuki", "Takahashi",
        "Watanabe", "Kim", "Lee", "Park", "Choi", "Jung", "Patel", "Singh", "Kumar", "Sharma",
        "Gupta", "Nguyen", "Tran", "Le", "Pham", "Hoang",
    ),
    titles=(
        "Dr.", "Prof.", "Mr.", "Mrs.", "Ms.", "Shifu", "Sensei", "Sifu", "Guru", "Pandit",
        "Acharya", "Swami", "Baba", "Lao", "Xiansheng",
    ),
)

# French, Italian, German, Russian and Spanish names
EUROPEAN = RegionNames(
    male_first=(
        "Jean", "Pierre", "Michel", "André", "Philippe", "Giovanni", "Marco", "Luca",
        "Alessandro", "Matteo", "Hans", "Peter", "Thomas", "Michael", "Andreas", "Ivan",
        "Sergey", "Dmitri", "Alexei", "Mikhail", "Carlos", "Javier", "Miguel", "Antonio", "Juan",
    ),
    female_first=(
        "Marie", "Sophie", "Isabelle", "Nathalie", "Valérie", "Giulia", "Sofia", "Alessia",
        "Chiara", "Elena", "Anna", "Maria", "Christine", "Petra", "Sabine", "Olga", "Irina",
        "Natalia", "Svetlana", "Carmen", "Isabel", "Ana", "Lucia",
    ),
    last=(
        "Martin", "Bernard", "Dubois", "Thomas", "Robert", "Rossi", "Ferrari", "Russo",
        "Bianchi", "Romano", "Müller", "Schmidt", "Schneider", "Fischer", "Weber", "Ivanov",
        "Smirnov", "Kuznetsov", "Popov", "Sokolov", "Garcia", "Rodriguez", "Gonzalez",
        "Fernandez", "Lopez",
    ),
    titles=(
        "Herr", "Frau", "Dr.", "Prof.", "M.", "Mme", "Mlle", "Sig.", "Dott.", "Ing.", "Mag.",
        "Dr.med.", "Lic.", "Arch.", "Avv.",
    ),
)

REGION_NAMES: MappingProxyType[Region, RegionNames] = MappingProxyType(
    {
        Region.NIGERIAN: NIGERIAN,
        Region.ARABIC: ARABIC,
        Region.WESTERN: WESTERN,
        Region.ASIAN: ASIAN,
        Region.EUROPEAN: EUROPEAN,
    }
)

# Shared across regions
MIDDLE_NAMES: tuple[str, ...] = (
    "Ade", "Mohammed", "James", "Lee", "Xiao", "Jean", "Marie", "Anne", "Lynn", "Grace",
    "David", "Michael", "John", "William", "Robert", "Fatima", "Aisha", "Chinedu", "Oluwatobi",
    "Emeka", "Yong", "Min", "Wei", "Jian", "Hao", "Giovanni", "Marco", "Pierre", "Hans", "Ivan",
    "Olga", "Sophie", "Mei", "Hana", "Priya",
)

if set(REGION_NAMES) != set(Region):
    raise DataTableError("Every region must have a name table")
