import os
from dotenv import load_dotenv

load_dotenv()

ARISE_BASE_URL = os.getenv("ARISE_BASE_URL", "http://localhost:8006")
# identity the auth gateway would normally inject
ARISE_USER_ID  = os.getenv("ARISE_USER_ID", "demo-student")

HTTP_TIMEOUT_S = 60
