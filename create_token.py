"""Print an admin token for an allowed e-mail (valid 24 hours).

Usage:
    JWT_SECRET=... python create_token.py admin@example.com
"""
import argparse
import sys

from rasya_api.app.core.config import settings
from rasya_api.app.core.security import create_admin_token

parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
parser.add_argument("email")
args = parser.parse_args()

if not settings.jwt_secret:
    sys.exit("JWT_SECRET is not set")
print(create_admin_token(args.email.strip().lower()))
