# Gazetteers scanned in list order by the location extractor; the first
# entry found in the query wins, so order is part of the behavior.
MAJOR_US_CITIES: tuple[str, ...] = (
    "new york",
    "los angeles",
    "chicago",
    "houston",
    "phoenix",
    "philadelphia",
    "san antonio",
    "san diego",
    "dallas",
    "san jose",
    "austin",
    "jacksonville",
    "fort worth",
    "columbus",
    "charlotte",
    "san francisco",
    "indianapolis",
    "seattle",
    "denver",
    "washington dc",
    "boston",
    "el paso",
    "nashville",
    "detroit",
    "oklahoma city",
    "portland",
    "las vegas",
    "memphis",
    "louisville",
    "baltimore",
    "milwaukee",
    "albuquerque",
    "tucson",
    "fresno",
    "mesa",
    "sacramento",
    "atlanta",
    "kansas city",
    "colorado springs",
    "omaha",
    "raleigh",
    "miami",
    "long beach",
    "virginia beach",
    "oakland",
    "minneapolis",
    "tulsa",
    "tampa",
    "arlington",
    "new orleans",
    "wichita",
    "cleveland",
    "bakersfield",
    "aurora",
    "anaheim",
    "honolulu",
    "santa ana",
    "riverside",
    "corpus christi",
    "lexington",
    "henderson",
    "stockton",
    "saint paul",
    "st. louis",
    "cincinnati",
    "pittsburgh",
    "greensboro",
    "anchorage",
    "plano",
    "lincoln",
    "orlando",
    "irvine",
    "newark",
    "durham",
    "chula vista",
    "toledo",
    "fort wayne",
    "st. petersburg",
    "laredo",
    "jersey city",
    "chandler",
    "madison",
    "lubbock",
    "scottsdale",
    "reno",
    "buffalo",
    "gilbert",
    "glendale",
    "north las vegas",
    "winston-salem",
    "chesapeake",
    "norfolk",
    "fremont",
    "garland",
    "irving",
    "hialeah",
    "richmond",
    "boise",
    "spokane",
    "baton rouge",
    "salt lake city",
    "brooklyn",
    "manhattan",
)

US_STATES: tuple[str, ...] = (
    "alabama",
    "alaska",
    "arizona",
    "arkansas",
    "california",
    "colorado",
    "connecticut",
    "delaware",
    "florida",
    "georgia",
    "hawaii",
    "idaho",
    "illinois",
    "indiana",
    "iowa",
    "kansas",
    "kentucky",
    "louisiana",
    "maine",
    "maryland",
    "massachusetts",
    "michigan",
    "minnesota",
    "mississippi",
    "missouri",
    "montana",
    "nebraska",
    "nevada",
    "new hampshire",
    "new jersey",
    "new mexico",
    "new york",
    "north carolina",
    "north dakota",
    "ohio",
    "oklahoma",
    "oregon",
    "pennsylvania",
    "rhode island",
    "south carolina",
    "south dakota",
    "tennessee",
    "texas",
    "utah",
    "vermont",
    "virginia",
    "washington",
    "west virginia",
    "wisconsin",
    "wyoming",
)

# Coin names and tickers mapped to the symbol spoken back to the user.
# Scanned in order by the symbol extractor; full names come before tickers.
CRYPTO_SYMBOLS: dict[str, str] = {
    "bitcoin": "BTC",
    "ethereum": "ETH",
    "dogecoin": "DOGE",
    "solana": "SOL",
    "cardano": "ADA",
    "ripple": "XRP",
    "litecoin": "LTC",
    "chainlink": "LINK",
    "polkadot": "DOT",
    "binance coin": "BNB",
    "tether": "USDT",
    "shiba inu": "SHIB",
    "btc": "BTC",
    "eth": "ETH",
    "doge": "DOGE",
    "xrp": "XRP",
    "ltc": "LTC",
    "bnb": "BNB",
    "usdt": "USDT",
    "shib": "SHIB",
}

CUISINES: tuple[str, ...] = (
    "italian",
    "chinese",
    "mexican",
    "japanese",
    "thai",
    "indian",
    "french",
    "greek",
    "korean",
    "vietnamese",
    "spanish",
    "mediterranean",
    "middle eastern",
    "lebanese",
    "turkish",
    "ethiopian",
    "caribbean",
    "cuban",
    "brazilian",
    "peruvian",
    "american",
    "southern",
    "cajun",
    "seafood",
    "vegan",
    "vegetarian",
    "sushi",
    "pizza",
    "bbq",
    "barbecue",
    "steak",
    "ramen",
    "tapas",
)
