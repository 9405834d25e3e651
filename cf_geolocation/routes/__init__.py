from flask import Blueprint

# Initialize Blueprints
bp_api = Blueprint('api', __name__, url_prefix='/api')
bp_debug = Blueprint('debug', __name__, url_prefix='/debug')

# Import views to register routes
from . import api, debug
