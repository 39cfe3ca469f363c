"""Save and restore body collections.

Two formats are supported, chosen by file suffix:

- ``.npz``: parallel numpy arrays (names, masses, positions, velocities,
  accelerations) plus scalar metadata stored under ``metadata_<key>``.
- ``.json``: one record per body, readable and hand-editable.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from solar_sim.physics.body import Body

# Body attribute -> array name in .npz files
_VECTOR_FIELDS = {
    "position": "positions",
    "velocity": "velocities",
    "acceleration": "accelerations",
}


def _check_suffix(path: Path):
    if path.suffix not in (".npz", ".json"):
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .npz or .json")


def _vector_array(bodies: Sequence[Body], field: str) -> np.ndarray:
    rows = [getattr(b, field).to_list() for b in bodies]
    return np.array(rows, dtype=np.float64).reshape(-1, 3)


def save_state(
    bodies: Sequence[Body],
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Write every body's name, mass and kinematic state to a file.

    Args:
        bodies: Bodies to save, in collection order
        output_path: Output file path (.npz or .json)
        metadata: Optional run information (time, steps, ...). Only scalar
            values are kept in .npz files.
    """
    output_path = Path(output_path)
    _check_suffix(output_path)
    metadata = metadata or {}

    if output_path.suffix == '.npz':
        arrays = {key: _vector_array(bodies, field) for field, key in _VECTOR_FIELDS.items()}
        arrays['names'] = np.array([b.name for b in bodies], dtype=str)
        arrays['masses'] = np.array([b.mass for b in bodies], dtype=np.float64)
        for key, value in metadata.items():
            if isinstance(value, (int, float, str)):
                arrays[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **arrays)
    else:
        records = []
        for body in bodies:
            record = {'name': body.name, 'mass': body.mass}
            for field in _VECTOR_FIELDS:
                record[field] = getattr(body, field).to_list()
            records.append(record)
        with open(output_path, 'w') as f:
            json.dump({'bodies': records, 'metadata': metadata}, f, indent=2)


def load_state(input_path: str) -> Tuple[List[Body], Dict[str, Any]]:
    """Load bodies written by :func:`save_state`.

    Returns:
        Tuple of (bodies, metadata)
    """
    input_path = Path(input_path)
    _check_suffix(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            bodies = [
                Body(str(name), float(mass), pos.tolist(), vel.tolist(), acc.tolist())
                for name, mass, pos, vel, acc in zip(
                    data['names'], data['masses'],
                    *(data[key] for key in _VECTOR_FIELDS.values()),
                )
            ]
            metadata = {
                key[len('metadata_'):]: data[key].item()
                for key in data.keys() if key.startswith('metadata_')
            }
        return bodies, metadata

    with open(input_path, 'r') as f:
        state = json.load(f)
    bodies = [
        Body(r['name'], r['mass'], r['position'], r['velocity'], r.get('acceleration'))
        for r in state['bodies']
    ]
    return bodies, state.get('metadata', {})
