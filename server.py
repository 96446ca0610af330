import logging
from functools import wraps

from flask import Blueprint, Flask, current_app, jsonify, request, session

import auth
from auth import AuthError
from config import Config
from forms import (form_data, parse_booking, parse_description_request, parse_search,
                   parse_train)
from genai_service import GenerationFailure, TextGenerator, format_travel_date
from ledger import (InsufficientCapacity, InvalidSeatConfiguration, Ledger, MoveoError,
                    NotFound, ValidationError)
from models import Train, User
from seed_data import demo_trains

bp = Blueprint("moveo", __name__)

ERROR_STATUS = [
    (ValidationError,          400),
    (InvalidSeatConfiguration, 400),
    (NotFound,                 404),
    (InsufficientCapacity,     409),
    (GenerationFailure,        502),
]


def get_ledger() -> Ledger:
    return current_app.extensions["ledger"]


def get_generator() -> TextGenerator:
    return current_app.extensions["text_generator"]


def current_user():
    data = session.get("user")
    return User.from_dict(data) if data else None


def login_required(admin: bool = False):
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            user = current_user()
            if user is None:
                raise AuthError("Please log in first.", status=401)
            if admin and not user.is_admin:
                raise AuthError("Admin access required.", status=403)
            if not admin and user.is_admin:
                raise AuthError("This action is only available to travellers.", status=403)
            return view(user, *args, **kwargs)
        return wrapped
    return decorator


def train_with_quotes(train: Train, passengers: int) -> dict:
    out = train.to_dict()
    out["quotes"] = [{
        "class":          name.value,
        "availableSeats": fc.available_seats,
        "totalPrice":     float(fc.price * passengers),
        "soldOut":        fc.available_seats < passengers,
    } for name, fc in train.classes.items()]
    return out


@bp.app_errorhandler(MoveoError)
def handle_error(error: MoveoError):
    status = getattr(error, "status", None)
    if status is None:
        status = next((code for kind, code in ERROR_STATUS if isinstance(error, kind)), 400)
    body = {"error": error.message}
    if isinstance(error, InvalidSeatConfiguration):
        body.update(fareClass=error.fare_class.value, available=error.available, total=error.total)
    elif isinstance(error, InsufficientCapacity):
        body.update(fareClass=error.fare_class.value, remaining=error.remaining)
    current_app.logger.info("%s %s -> %s: %s", request.method, request.path, status, error.message)
    return jsonify(body), status


@bp.route('/login', methods=['POST'])
def login():
    data = form_data(request.get_json(silent=True))
    user = auth.login(data.get('email'), data.get('password'), data.get('role'),
                      current_app.config['ADMIN_EMAIL'], current_app.config['ADMIN_PASSWORD'])
    session['user'] = user.to_dict()
    return jsonify({"message": f"Welcome, {user.role.value} {user.email}!", "user": user.to_dict()})


@bp.route('/signup', methods=['POST'])
def signup():
    data = form_data(request.get_json(silent=True))
    user = auth.signup(data.get('email'), data.get('password'))
    session['user'] = user.to_dict()
    return jsonify({"message": f"Account created for {user.email}. Welcome!", "user": user.to_dict()}), 201


@bp.route('/logout', methods=['POST'])
def logout():
    session.pop('user', None)
    return jsonify({"message": "You have been logged out."})


@bp.route('/stations', methods=['GET'])
def stations():
    return jsonify(get_ledger().stations())


@bp.route('/trains', methods=['GET'])
def get_trains():
    return jsonify([t.to_dict() for t in get_ledger().trains])


@bp.route('/trains', methods=['POST'])
@login_required(admin=True)
def add_train(user):
    train = get_ledger().add_train(parse_train(request.get_json(silent=True)))
    return jsonify({"message": f"Train {train.train_number} added successfully!", "train": train.to_dict()}), 201


@bp.route('/trains/<train_id>', methods=['PUT'])
@login_required(admin=True)
def update_train(user, train_id):
    train = get_ledger().update_train(parse_train(request.get_json(silent=True), train_id=train_id))
    return jsonify({"message": "Train details updated successfully!", "train": train.to_dict()})


@bp.route('/trains/<train_id>', methods=['DELETE'])
@login_required(admin=True)
def delete_train(user, train_id):
    get_ledger().delete_train(train_id)
    return jsonify({"message": f"Train ID {train_id} has been deleted."})


@bp.route('/trains/search', methods=['POST'])
@login_required()
def search_trains(user):
    query  = parse_search(request.get_json(silent=True))
    trains = get_ledger().search(query.from_station, query.to_station, query.class_filter, query.passengers)
    return jsonify({
        "date":       query.date,
        "passengers": query.passengers,
        "count":      len(trains),
        "trains":     [train_with_quotes(t, query.passengers) for t in trains],
    })


@bp.route('/trains/description', methods=['POST'])
@login_required(admin=True)
def generate_description(user):
    req  = parse_description_request(request.get_json(silent=True))
    text = get_generator().generate_marketing_description(req.source, req.destination,
                                                          req.price_first, req.price_economy)
    return jsonify({"description": text})


@bp.route('/bookings', methods=['GET'])
@login_required()
def my_bookings(user):
    return jsonify([b.to_dict() for b in get_ledger().bookings_for(user.uid)])


@bp.route('/bookings', methods=['POST'])
@login_required()
def book(user):
    req     = parse_booking(request.get_json(silent=True))
    booking = get_ledger().reserve(req.train_id, req.date, req.passengers, req.fare_class, user.uid)
    return jsonify({
        "message": f"Booking confirmed! Total: ₹{booking.total_price:.2f}.",
        "booking": booking.to_dict(),
    }), 201


def _own_booking(user: User, booking_id: str):
    booking = get_ledger().get_booking(booking_id)
    if booking.user_id != user.uid:
        raise NotFound(f"Booking {booking_id} not found.")
    return booking


@bp.route('/bookings/<booking_id>', methods=['DELETE'])
@login_required()
def cancel(user, booking_id):
    booking = _own_booking(user, booking_id)
    get_ledger().release(booking)
    return jsonify({"message": f"Booking {booking.id} has been cancelled."})


@bp.route('/bookings/<booking_id>/itinerary', methods=['POST'])
@login_required()
def itinerary(user, booking_id):
    booking = _own_booking(user, booking_id)
    result  = get_generator().generate_itinerary(booking.destination, format_travel_date(booking.date))
    return jsonify(result.to_dict())


def create_app(config=None, ledger: Ledger = None, generator: TextGenerator = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config or Config)
    app.json.sort_keys = False

    if ledger is None:
        ledger = Ledger(demo_trains() if app.config['SEED_DEMO_DATA'] else ())
    if generator is None:
        generator = TextGenerator(api_key=app.config['GEMINI_API_KEY'], model=app.config['GEMINI_MODEL'])

    app.extensions["ledger"]         = ledger
    app.extensions["text_generator"] = generator
    app.register_blueprint(bp)
    return app


if __name__ == '__main__':
    logging.basicConfig(level=Config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(debug=True)
