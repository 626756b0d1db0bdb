import os
import sys

# Add the project directory to the sys.path
project_home = os.path.dirname(os.path.abspath(__file__))
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# WSGI entry point, e.g. `gunicorn wsgi:application`
from app import create_app

application = create_app(os.environ.get('FLASK_ENV', 'production'))
