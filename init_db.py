#!/usr/bin/env python
"""Database initialization script for the translation backend.

This script creates all database tables based on the SQLAlchemy models.
Run this once before starting the application for the first time.

Usage:
    python init_db.py
"""

import logging
import os
import sys
from tribalbridge import create_app, db

logger = logging.getLogger('init_db')

TABLES_INFO = [
    ("translations", "Saved translations of signed-in users"),
    ("translation_feedback", "User ratings of their translations"),
]


def init_database():
    """Initialize the database by creating all tables."""
    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)

    with app.app_context():
        try:
            logger.info(f"Creating database tables for {config_name} ({app.config['SQLALCHEMY_DATABASE_URI']})")
            db.create_all()
        except Exception as e:
            logger.error(f"Error creating database: {type(e).__name__}: {e}")
            return False

    for table_name, description in TABLES_INFO:
        logger.info(f"  {table_name:<25} - {description}")
    logger.info("Database initialization complete. Start the server with: python wsgi.py")
    return True


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    success = init_database()
    sys.exit(0 if success else 1)
