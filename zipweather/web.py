from typing import Iterable, Optional, Tuple

from flask import Flask, current_app, flash, redirect, render_template, request, url_for

from .config import SECRET_KEY
from .errors import WeatherLookupError
from .services import WeatherLookupService
from .utils import is_zip_code

# Key under `app.extensions` holding the WeatherLookupService
SERVICE_KEY = "weather_lookup"


def home():
    return render_template("home.html")


def lookup():
    zip_code = request.values.get("zipCode", "").strip()
    if not zip_code:
        flash("Please enter a ZIP code.", "error")
        return redirect(url_for("home"))
    if not is_zip_code(zip_code):
        flash(f"'{zip_code}' is not a five-digit ZIP code.", "error")
        return redirect(url_for("home"))

    service = current_app.extensions[SERVICE_KEY]
    try:
        current_app.logger.info("Looking up weather for %s...", zip_code)
        result = service.lookup(zip_code)
    except WeatherLookupError as exc:
        current_app.logger.warning("Lookup for %s failed: %s", zip_code, exc)
        flash(str(exc), "error")
        return redirect(url_for("home"))

    return render_template("lookup.html", lookup=result)


Route = Tuple[str, str, object, Tuple[str, ...]]

# (rule, endpoint, view, methods)
ROUTES: Tuple[Route, ...] = (
    ("/", "home", home, ("GET",)),
    ("/lookup", "lookup", lookup, ("GET", "POST")),
)


def create_app(
    service: Optional[WeatherLookupService] = None,
    routes: Iterable[Route] = ROUTES,
    secret_key: str = SECRET_KEY,
) -> Flask:
    """Build the Flask app from an explicit route table."""
    app = Flask(__name__)
    app.secret_key = secret_key
    app.extensions[SERVICE_KEY] = service or WeatherLookupService()

    for rule, endpoint, view, methods in routes:
        app.add_url_rule(rule, endpoint, view, methods=list(methods))
    return app
