from decimal import Decimal

from models import FareClass, FareClassName, Train

# id, name, number, source, destination, departure, description,
# (price, total, available) for First, Business, Economy
DEMO_TRAINS = [
    ("T001", "Capital Express", "12051", "DELHI", "MUMBAI", "08:00",
     "Journey from the heart of India to the financial capital in style. Our Capital Express offers unparalleled comfort and scenic views.",
     (3500, 50, 45), (2000, 100, 90), (800, 200, 150)),
    ("T002", "Metro Link", "22301", "MUMBAI", "KOLKATA", "14:30",
     "Connect between two major metro cities with speed and efficiency. Perfect for business travelers and tourists alike.",
     (4000, 40, 40), (2500, 80, 75), (1000, 180, 180)),
    ("T003", "Eastern Arrow", "15929", "KOLKATA", "DELHI", "21:00",
     None,
     (3800, 40, 20), (2200, 90, 80), (950, 210, 150)),
    ("T004", "South Connect", "11021", "BENGALURU", "CHENNAI", "06:15",
     "Experience the swift journey between two of South India's biggest hubs. Ideal for a quick weekend getaway or a business trip.",
     (1800, 30, 25), (1200, 70, 60), (550, 150, 140)),
    ("T005", "Deccan Queen", "12124", "PUNE", "MUMBAI", "17:10",
     "The legendary Deccan Queen, connecting Pune and Mumbai with impeccable service and a rich history.",
     (1000, 20, 10), (700, 50, 45), (300, 120, 100)),
    ("T006", "Tech Express", "20608", "HYDERABAD", "BENGALURU", "22:00",
     "Overnight service linking the tech capitals of Hyderabad and Bengaluru. Travel while you sleep and arrive fresh for your meetings.",
     (2500, 40, 35), (1800, 80, 80), (750, 160, 120)),
    ("T007", "Western Star", "12957", "AHMEDABAD", "DELHI", "19:30",
     "Travel from the vibrant city of Ahmedabad to the nation's capital with our premium overnight service.",
     (3200, 35, 30), (2100, 90, 85), (900, 200, 190)),
    ("T008", "Coastal Cruiser", "12842", "CHENNAI", "KOLKATA", "11:45",
     "Enjoy the scenic coastal route from Chennai to Kolkata. A journey as beautiful as the destination.",
     (4200, 30, 15), (2800, 70, 50), (1100, 180, 175)),
    ("T009", "Mumbai Duronto", "12262", "MUMBAI", "DELHI", "23:00",
     "The fastest connection back to the capital. Experience a non-stop, high-speed journey overnight.",
     (3600, 50, 50), (2100, 100, 95), (850, 200, 180)),
    ("T010", "Garden City Express", "11022", "CHENNAI", "BENGALURU", "16:00",
     "Return to the Garden City with our comfortable and convenient afternoon service.",
     (1800, 30, 30), (1200, 70, 65), (550, 150, 125)),
    ("T011", "Rajdhani Express", "12493", "PUNE", "DELHI", "11:00",
     "Connects the cultural capital of Maharashtra to the national capital with premium, high-speed service.",
     (4500, 40, 38), (3200, 80, 70), (1500, 150, 120)),
    ("T012", "Charminar Express", "12759", "HYDERABAD", "CHENNAI", "18:30",
     "A popular choice for comfortable overnight travel between Hyderabad and Chennai.",
     (2200, 30, 25), (1600, 60, 55), (650, 180, 150)),
    ("T013", "Shatabdi Express", "12009", "AHMEDABAD", "MUMBAI", "06:40",
     "High-speed, premium day service connecting the commercial hubs of Gujarat and Maharashtra.",
     (1500, 25, 20), (900, 80, 78), (450, 140, 130)),
    ("T014", "Udyan Express", "11302", "BENGALURU", "PUNE", "20:30",
     "Travel comfortably overnight from the Garden City to the Oxford of the East.",
     (2800, 35, 30), (1900, 75, 65), (800, 160, 140)),
    ("T015", "Falaknuma Express", "12703", "KOLKATA", "HYDERABAD", "07:25",
     "A superfast express connecting the City of Joy with the City of Pearls.",
     (4300, 30, 22), (2900, 90, 80), (1200, 200, 195)),
    ("T016", "Karnataka Express", "12628", "DELHI", "BENGALURU", "21:15",
     "A long-distance superfast train covering the length of the country, connecting the capital to the Silicon Valley of India.",
     (5500, 50, 45), (3800, 120, 110), (1800, 250, 220)),
]


def demo_trains() -> list:
    trains = []
    for train_id, name, number, source, destination, departure, description, *plans in DEMO_TRAINS:
        classes = {
            fare_class: FareClass(price=Decimal(price), total_seats=total, available_seats=available)
            for fare_class, (price, total, available) in zip(FareClassName, plans)
        }
        trains.append(Train(
            id=train_id,
            train_name=name,
            train_number=number,
            source=source,
            destination=destination,
            departure=departure,
            description=description,
            classes=classes,
        ))
    return trains
