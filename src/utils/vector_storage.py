"""Plain-text dump of a vector sampled on the radial grid."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def store_vector(values, path, nodes, step, origin=0.0, accuracy=6, r=None):
    """Write ``origin + i*step`` (or ``r[i]``) and ``values[i]`` one pair per line.

    Parameters
    ----------
    values : array_like
        Vector of length ``nodes``.
    path : str or Path or None
        Output file. Nothing is written for None.
    nodes : int
        Number of entries to write.
    step, origin : float
        Grid spacing and first grid point.
    accuracy : int
        Decimal places of both columns.
    r : array_like, optional
        Node radii for non-uniform grids, used instead of step and origin.
    """
    if path is None:
        return

    values = np.asarray(values, dtype=np.float64)
    if values.shape[0] < nodes:
        raise ValueError(f"Vector has {values.shape[0]} entries, {nodes} requested")

    if r is None:
        grid = origin + step * np.arange(nodes)
    else:
        grid = np.asarray(r, dtype=np.float64)[:nodes]
    np.savetxt(path, np.column_stack([grid, values[:nodes]]), fmt=f"%.{int(accuracy)}f", delimiter=" ")
    logger.info("Stored %d values in %s", nodes, path)
