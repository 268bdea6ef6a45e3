from __future__ import annotations

from typing import Callable, Dict

import httpx

ResponseHook = Callable[[httpx.Response], None]
Headers = Dict[str, str]
