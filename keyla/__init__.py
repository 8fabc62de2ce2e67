from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from keyla.services.configuration import apply_log_level
    apply_log_level(flask_app, flask_app.config.get('LOG_LEVEL', 'INFO'))

    from keyla.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Models must be imported before the repositories touch the session
    from keyla import models  # noqa: F401
    from keyla.services import Services
    flask_app.extensions['keyla'] = Services(flask_app)

    from keyla.main import main
    flask_app.register_blueprint(main)

    from keyla.api.profiles import profiles
    from keyla.api.typing_tests import typing_tests
    from keyla.api.stats import stats
    from keyla.api.analytics import analytics
    from keyla.api.config import config_api
    flask_app.register_blueprint(profiles, url_prefix='/api/profiles')
    flask_app.register_blueprint(typing_tests, url_prefix='/api')
    flask_app.register_blueprint(stats, url_prefix='/api/stats')
    flask_app.register_blueprint(analytics, url_prefix='/api/analytics')
    flask_app.register_blueprint(config_api, url_prefix='/api/config')

    from keyla.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from keyla.records import Profile
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            services = flask_app.extensions['keyla']
            for name in ['ada', 'grace', 'linus']:
                services.profile_repository.create(Profile(name=name, email=f'{name}@example.com'))
            print('Database has been reset and seeded!')

    @click.command('word-cache')
    def word_cache_command():
        """Lists the dictionary sources currently held in the word cache."""
        services = flask_app.extensions['keyla']
        click.echo(f"{len(services.catalog.all_sources())} dictionaries available")
        names = services.word_cache.cached_names()
        if not names:
            click.echo('Word cache is empty')
        for name in names:
            click.echo(name)

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(word_cache_command)

    return flask_app
