from fastapi import Depends
from services.cache import get_cache_client
from services.images import get_image_client
from auth.security import get_current_client

# --- DEPENDENCY INJECTION SETUP ---
CLIENT_AUTH = Depends(get_current_client)
CACHE_CLIENT = Depends(get_cache_client)
IMAGE_CLIENT = Depends(get_image_client)
