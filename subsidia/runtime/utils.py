"""
subsidia.runtime.utils - Helper registry for generated code

Generated code names collection helpers by container family and Latin
method name (e.g. tabula.conflata, lista.inveniIndicem). This module maps
those names onto the functions in subsidia.runtime.core:

- HELPERS: family -> Latin method name -> helper
- resolve_helper: look up a single helper
- setup_runtime_env: bind every helper into an environment dict under
  "<family>_<method>" names (tabula_conflata, lista_indice_de, ...)
"""

import logging
from typing import Any, Callable, Optional

from subsidia.runtime.core import (
    append,
    chunk,
    difference,
    find_index,
    group_by,
    index_of,
    intersection,
    invert,
    is_subset,
    is_superset,
    join,
    last_n,
    map_keys,
    map_values,
    merge,
    omit,
    partition,
    prepend,
    reverse,
    select,
    sort,
    symmetric_difference,
    to_list,
    to_pairs,
    union,
    unique,
)
from subsidia.runtime.types import HelperNotFound, normalize_name

logger = logging.getLogger(__name__)

# Container family names as they appear in generated code
TABULA = "tabula"
COPIA = "copia"
LISTA = "lista"

HELPERS: dict[str, dict[str, Callable[..., Any]]] = {
    TABULA: {
        "conflata": merge,
        "inversa": invert,
        "selecta": select,
        "omissa": omit,
        "inLista": to_pairs,
        "mappaValores": map_values,
        "mappaClaves": map_keys,
    },
    COPIA: {
        "unio": union,
        "intersectio": intersection,
        "differentia": difference,
        "symmetrica": symmetric_difference,
        "inLista": to_list,
        "subcopia": is_subset,
        "supercopia": is_superset,
    },
    LISTA: {
        "addita": append,
        "praeposita": prepend,
        "ordinata": sort,
        "inversa": reverse,
        "unica": unique,
        "ultima": last_n,
        "congrega": group_by,
        "partire": partition,
        "indiceDe": index_of,
        "inveniIndicem": find_index,
        "coniunge": join,
        "fragmenta": chunk,
    },
}

# Same tables keyed by normalized (snake_case) method names
_NORMALIZED: dict[str, dict[str, Callable[..., Any]]] = {
    family: {normalize_name(name): fn for name, fn in methods.items()}
    for family, methods in HELPERS.items()
}


def resolve_helper(family: str, name: str) -> Callable[..., Any]:
    """
    Look up the helper for a family and method name.

    Args:
        family: Container family ("tabula", "copia" or "lista")
        name: Latin method name, camelCase or snake_case ("inLista", "in_lista")

    Returns:
        The helper function

    Raises:
        HelperNotFound: If the family or method is unknown
    """
    methods = _NORMALIZED.get(family)
    if methods is None:
        raise HelperNotFound(family, name)
    fn = methods.get(normalize_name(name))
    if fn is None:
        raise HelperNotFound(family, name)
    return fn


def runtime_binding_name(family: str, name: str) -> str:
    """Return the environment name generated code uses for a helper."""
    return f"{family}_{normalize_name(name)}"


def setup_runtime_env(env: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Populate an environment dict with every collection helper.

    Each helper is bound as "<family>_<normalized method>", e.g.
    tabula_conflata, copia_in_lista, lista_inveni_indicem. Existing
    entries with other names are left alone.

    Returns:
        The populated environment (a new dict if env was None)
    """
    if env is None:
        env = {}
    for family, methods in _NORMALIZED.items():
        for name, fn in methods.items():
            env[runtime_binding_name(family, name)] = fn
    logger.debug(
        "bound %d collection helpers into runtime env",
        sum(len(methods) for methods in _NORMALIZED.values()),
    )
    return env
