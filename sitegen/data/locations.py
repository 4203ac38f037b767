"""Top 50 UK cities by population, the location axis of the programmatic pages."""

from typing import Tuple

from sitegen.models.location import Location

LOCATIONS: Tuple[Location, ...] = (
    # England - major cities
    Location(name="London", slug="london", region="London", population=9540576),
    Location(name="Birmingham", slug="birmingham", region="West Midlands", population=2607437),
    Location(name="Manchester", slug="manchester", region="Greater Manchester", population=2730076),
    Location(name="Leeds", slug="leeds", region="West Yorkshire", population=1889095),
    Location(name="Liverpool", slug="liverpool", region="Merseyside", population=864122),
    Location(name="Newcastle", slug="newcastle", region="Tyne and Wear", population=774891),
    Location(name="Sheffield", slug="sheffield", region="South Yorkshire", population=685368),
    Location(name="Bristol", slug="bristol", region="Bristol", population=617280),
    Location(name="Nottingham", slug="nottingham", region="Nottinghamshire", population=729977),
    Location(name="Leicester", slug="leicester", region="Leicestershire", population=508916),
    # Scotland
    Location(name="Glasgow", slug="glasgow", region="Scotland", population=635640),
    Location(name="Edinburgh", slug="edinburgh", region="Scotland", population=524930),
    Location(name="Aberdeen", slug="aberdeen", region="Scotland", population=198590),
    # Wales
    Location(name="Cardiff", slug="cardiff", region="Wales", population=362310),
    Location(name="Swansea", slug="swansea", region="Wales", population=246466),
    # Northern Ireland
    Location(name="Belfast", slug="belfast", region="Northern Ireland", population=345418),
    # England - additional major cities
    Location(name="Brighton", slug="brighton", region="East Sussex", population=474485),
    Location(name="Plymouth", slug="plymouth", region="Devon", population=262100),
    Location(name="Southampton", slug="southampton", region="Hampshire", population=253651),
    Location(name="Reading", slug="reading", region="Berkshire", population=318014),
    Location(name="Derby", slug="derby", region="Derbyshire", population=257174),
    Location(name="Portsmouth", slug="portsmouth", region="Hampshire", population=238137),
    Location(name="Coventry", slug="coventry", region="West Midlands", population=345385),
    Location(name="Bradford", slug="bradford", region="West Yorkshire", population=539776),
    Location(name="Wolverhampton", slug="wolverhampton", region="West Midlands", population=263357),
    Location(name="Bournemouth", slug="bournemouth", region="Dorset", population=395784),
    Location(name="Norwich", slug="norwich", region="Norfolk", population=213166),
    Location(name="Swindon", slug="swindon", region="Wiltshire", population=185609),
    Location(name="Milton Keynes", slug="milton-keynes", region="Buckinghamshire", population=229941),
    Location(name="Northampton", slug="northampton", region="Northamptonshire", population=225100),
    # Regional hub cities
    Location(name="Oxford", slug="oxford", region="Oxfordshire", population=154600),
    Location(name="Cambridge", slug="cambridge", region="Cambridgeshire", population=145674),
    Location(name="York", slug="york", region="North Yorkshire", population=153717),
    Location(name="Bath", slug="bath", region="Somerset", population=101557),
    Location(name="Exeter", slug="exeter", region="Devon", population=130709),
    Location(name="Chester", slug="chester", region="Cheshire", population=90524),
    Location(name="Canterbury", slug="canterbury", region="Kent", population=55240),
    Location(name="Cheltenham", slug="cheltenham", region="Gloucestershire", population=116447),
    Location(name="Ipswich", slug="ipswich", region="Suffolk", population=144957),
    Location(name="Lincoln", slug="lincoln", region="Lincolnshire", population=97541),
    # Additional strategic cities
    Location(name="Stoke-on-Trent", slug="stoke-on-trent", region="Staffordshire", population=258366),
    Location(name="Hull", slug="hull", region="East Riding of Yorkshire", population=267014),
    Location(name="Middlesbrough", slug="middlesbrough", region="North Yorkshire", population=138400),
    Location(name="Sunderland", slug="sunderland", region="Tyne and Wear", population=277417),
    Location(name="Preston", slug="preston", region="Lancashire", population=141800),
    Location(name="Luton", slug="luton", region="Bedfordshire", population=225262),
    Location(name="Peterborough", slug="peterborough", region="Cambridgeshire", population=202110),
    Location(name="Blackpool", slug="blackpool", region="Lancashire", population=139305),
    Location(name="Watford", slug="watford", region="Hertfordshire", population=96577),
    Location(name="Slough", slug="slough", region="Berkshire", population=158025),
)
