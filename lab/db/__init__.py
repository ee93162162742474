from .supabase_client import get_supabase_client
from .queries import WordVectorQueries

__all__ = ["get_supabase_client", "WordVectorQueries"]
