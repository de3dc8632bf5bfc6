# File: lessonvault_app/core/extensions.py
# Infrastructure Layer: Flask Extensions initialization

from flask_cors import CORS

# Cross-origin access for the browser front end
cors = CORS()

__all__ = ["cors"]
