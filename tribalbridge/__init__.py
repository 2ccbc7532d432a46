from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_restx import Api
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

db = SQLAlchemy()
limiter = Limiter(key_func=get_remote_address)


def _env_flag(name, default='false'):
    return os.getenv(name, default).strip().lower() in ('true', '1', 'yes')


def create_app(config_name='development', overrides=None):
    app = Flask(__name__)

    # Config
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv(
        'DATABASE_URL',
        'sqlite:///tribalbridge.db'
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY', 'dev-secret')
    app.config['RATELIMIT_ENABLED'] = True

    # Translation providers (each one is skipped unless configured)
    app.config['OLLAMA_ENABLED'] = _env_flag('OLLAMA_ENABLED')
    app.config['OLLAMA_URL'] = os.getenv('OLLAMA_URL', 'http://localhost:11434')
    app.config['OLLAMA_MODEL'] = os.getenv('OLLAMA_MODEL', 'mistral')
    app.config['OPENAI_API_KEY'] = os.getenv('OPENAI_API_KEY', '')
    app.config['OPENAI_MODEL'] = os.getenv('OPENAI_MODEL', 'gpt-3.5-turbo')
    app.config['GOOGLE_TRANSLATE_API_KEY'] = os.getenv('GOOGLE_TRANSLATE_API_KEY', '')
    app.config['TRANSLATION_PROVIDER_TIMEOUT'] = float(os.getenv('TRANSLATION_PROVIDER_TIMEOUT', 10))

    if config_name == 'testing':
        app.config['TESTING'] = True
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'
        app.config['RATELIMIT_ENABLED'] = False
        app.config['OLLAMA_ENABLED'] = False
        app.config['OPENAI_API_KEY'] = ''
        app.config['GOOGLE_TRANSLATE_API_KEY'] = ''

    if overrides:
        app.config.update(overrides)

    # Initialize extensions
    db.init_app(app)
    limiter.init_app(app)
    CORS(app)

    # Service description lives under /docs so it does not shadow the API root
    Api(app, version='1.0', title='TribalBridge Translation API', doc='/docs')

    # Create tables with error handling
    with app.app_context():
        from tribalbridge import models  # noqa: F401  (registers tables)
        try:
            db.create_all()
        except Exception as e:
            logger.warning(f"Could not create database tables: {e}")

    # Translation pipeline is built once and shared read-only across requests
    from tribalbridge.services.translation import build_translation_service
    app.extensions['translation_service'] = build_translation_service(app.config)

    # Register routes
    from tribalbridge.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app
