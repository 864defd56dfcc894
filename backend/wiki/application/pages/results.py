from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Rendered:
    body: bytes


@dataclass(frozen=True)
class Redirect:
    location: str


PageResult = Union[Rendered, Redirect]
