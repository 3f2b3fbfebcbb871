"""Flask extensions initialization."""
from flask_marshmallow import Marshmallow
from adminui_api.utils.response import ApiResponder

# Initialize extensions
ma = Marshmallow()
responder = ApiResponder()
