import math
import random as _random

from .resolver import mutate, query
from .store import User

GREETING = 'Hello world!'


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@query
def hello(parent, info) -> str:
    return GREETING


@query
def random_number(parent, info) -> int:
    # 0 and 10 are drawn half as often as the values in between.
    rng = info.context.get('random') or _random
    return round_half_up(rng.random() * 10)


@query
def query_users(parent, info):
    return info.context['store'].all()


@mutate
def add_user(parent, info, first_name: str, last_name: str, email: str) -> User:
    user = User(first_name=first_name, last_name=last_name, email=email)
    return info.context['store'].add(user)
