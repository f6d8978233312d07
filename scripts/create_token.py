#!/usr/bin/env python
"""
Mint an access token for local testing.

Tokens are normally issued by the platform's auth service; this script signs
one with the local JWT_SECRET_KEY.

Usage: python scripts/create_token.py <user_id> [role]
"""
import sys

from flask_jwt_extended import create_access_token

from subscription_service import create_app

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    user_id = sys.argv[1]
    role = sys.argv[2] if len(sys.argv) > 2 else 'user'

    app = create_app()
    with app.app_context():
        claim = app.config.get('JWT_ROLE_CLAIM', 'role')
        print(create_access_token(identity=user_id, additional_claims={claim: role}))
