import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from periodica import __version__
from periodica.api.routes.elements import (
    get_element_by_atomic_number,
    get_element_by_name,
    get_element_by_symbol,
    get_elements_by_position,
    list_elements,
    search_elements,
)
from periodica.database.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    SubstanceNotFoundError,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Periodica", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _lookup(fn, *args):
    """Run a lookup and translate table errors into HTTP errors."""
    try:
        return fn(*args)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SubstanceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OutOfRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Lookup %s%r failed", getattr(fn, "__name__", fn), args)
        raise HTTPException(status_code=500, detail=str(e))


# ─── Health ─────────────────────────────────────────────────────────────────────

@app.get("/health")
def health():
    return {"status": "ok", "service": f"Periodica v{__version__}"}


# ─── Elements ───────────────────────────────────────────────────────────────────

@app.get("/api/elements")
def list_all_elements():
    """List every element in atomic-number order."""
    elements = _lookup(list_elements)
    return {"elements": elements, "count": len(elements)}


@app.get("/api/elements/search")
def search(q: str = ""):
    """Elements whose name or symbol contains `q`, case-insensitively."""
    elements = _lookup(search_elements, q)
    return {"elements": elements, "count": len(elements)}


@app.get("/api/elements/position")
def by_position(period: int, group: int):
    """All elements in a period (row) and group (column)."""
    elements = _lookup(get_elements_by_position, period, group)
    return {"period": period, "group": group, "elements": elements}


@app.get("/api/elements/name/{name}")
def by_name(name: str):
    return _lookup(get_element_by_name, name)


@app.get("/api/elements/symbol/{symbol}")
def by_symbol(symbol: str):
    return _lookup(get_element_by_symbol, symbol)


@app.get("/api/elements/number/{atomic_number}")
def by_atomic_number(atomic_number: int):
    return _lookup(get_element_by_atomic_number, atomic_number)
