import base64
import hashlib
import hmac

import bcrypt
from flask import current_app


def _peppered(password):
    # pepper is the HMAC key rather than a suffix: bcrypt reads only 72 bytes of input
    pepper = current_app.config["PEPPER"].encode('utf-8')
    digest = hmac.new(pepper, password.encode('utf-8'), hashlib.sha256).digest()
    return base64.b64encode(digest)


def hash_password(password):
    return bcrypt.hashpw(_peppered(password), bcrypt.gensalt())


def verify_password(entered_password, stored_hashed_password):
    if not entered_password or not stored_hashed_password:
        return False
    return bcrypt.checkpw(_peppered(entered_password), bytes(stored_hashed_password))
