import redis
from config.env_config import redis_host, redis_port, redis_username, redis_password


def get_redis_client() -> redis.Redis:
    # redis-py connects lazily, nothing hits the network until the first command
    return redis.Redis(
        host=redis_host,
        port=redis_port,
        decode_responses=True,
        username=redis_username,
        password=redis_password
    )
