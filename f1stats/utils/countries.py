"""Country lookup tables (circuit time zones, nationality flags)"""

# Approximate circuit time zones by the country name the F1 API reports
COUNTRY_TIMEZONES = {
    "Australia": "Australia/Melbourne",
    "Austria": "Europe/Vienna",
    "Azerbaijan": "Asia/Baku",
    "Bahrain": "Asia/Bahrain",
    "Belgium": "Europe/Brussels",
    "Brazil": "America/Sao_Paulo",
    "Canada": "America/Toronto",
    "China": "Asia/Shanghai",
    "Hungary": "Europe/Budapest",
    "Italy": "Europe/Rome",
    "Japan": "Asia/Tokyo",
    "Mexico": "America/Mexico_City",
    "Monaco": "Europe/Monaco",
    "Netherlands": "Europe/Amsterdam",
    "Qatar": "Asia/Qatar",
    "Saudi Arabia": "Asia/Riyadh",
    "Singapore": "Asia/Singapore",
    "Spain": "Europe/Madrid",
    "UAE": "Asia/Dubai",
    "United Arab Emirates": "Asia/Dubai",
    "UK": "Europe/London",
    "Great Britain": "Europe/London",
    "United Kingdom": "Europe/London",
    "USA": "America/New_York",
    "United States": "America/New_York",
    # US circuits span several zones
    "Miami": "America/New_York",
    "Austin": "America/Chicago",
    "Las Vegas": "America/Los_Angeles",
    # past / rumoured venues
    "Portugal": "Europe/Lisbon",
    "France": "Europe/Paris",
    "Germany": "Europe/Berlin",
    "Malaysia": "Asia/Kuala_Lumpur",
    "South Korea": "Asia/Seoul",
    "India": "Asia/Kolkata",
    "Turkey": "Europe/Istanbul",
    "Russia": "Europe/Moscow",
    "Argentina": "America/Argentina/Buenos_Aires",
    "South Africa": "Africa/Johannesburg",
    "Morocco": "Africa/Casablanca",
}

COUNTRY_FLAGS = {
    "Australia": "🇦🇺",
    "Austria": "🇦🇹",
    "Azerbaijan": "🇦🇿",
    "Bahrain": "🇧🇭",
    "Belgium": "🇧🇪",
    "Brazil": "🇧🇷",
    "Canada": "🇨🇦",
    "China": "🇨🇳",
    "Great Britain": "🇬🇧",
    "Hungary": "🇭🇺",
    "Italy": "🇮🇹",
    "Japan": "🇯🇵",
    "Mexico": "🇲🇽",
    "Monaco": "🇲🇨",
    "Netherlands": "🇳🇱",
    "Qatar": "🇶🇦",
    "Saudi Arabia": "🇸🇦",
    "Singapore": "🇸🇬",
    "Spain": "🇪🇸",
    "United Arab Emirates": "🇦🇪",
    "United States": "🇺🇸",
    "Germany": "🇩🇪",
    "France": "🇫🇷",
    "Switzerland": "🇨🇭",
    "Denmark": "🇩🇰",
    "Finland": "🇫🇮",
    "Poland": "🇵🇱",
    "Russia": "🇷🇺",
    "Thailand": "🇹🇭",
    "Argentina": "🇦🇷",
    "South Africa": "🇿🇦",
    "New Zealand": "🇳🇿",
    "Sweden": "🇸🇪",
}

DEFAULT_FLAG = "🏁"


def get_flag_emoji(country) -> str:
    return COUNTRY_FLAGS.get(country or "", DEFAULT_FLAG)
