from zipweather.config import HOST, LOG_LEVEL, PORT
from zipweather.utils import configure_logging
from zipweather.web import create_app

configure_logging(LOG_LEVEL)

# WSGI servers import `app:app`
app = create_app()


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=False, host=HOST, port=PORT)
