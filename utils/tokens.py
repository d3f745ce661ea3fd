import datetime
from flask import current_app
import jwt


def get_jwt_token(user_data):
    """Generate JWT token with user payload"""
    if not user_data:
        raise ValueError("User data must be provided to generate JWT token")

    expiration = datetime.datetime.utcnow() + datetime.timedelta(hours=current_app.config["JWT_EXPIRY_HOURS"])
    payload = {"exp": expiration, **user_data}

    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")

def decode_jwt(token):
    """Decode and validate a JWT token, returning None when it is unusable."""
    try:
        return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        current_app.logger.info("Token expired")
        return None
    except jwt.InvalidTokenError:
        current_app.logger.info("Invalid token provided")
        return None
