"""Contains the class for the representation of explicit Butcher tableaux."""
from __future__ import annotations
import warnings

import numpy as np


def _get_column_widths(co_arrays):
    len_max = []
    col_max = None
    for co_array in co_arrays:
        len_max.append(max([len(ai) for ai in co_array.reshape(-1)]))
        col_max = max(len_max)
    return len_max, col_max


def _read_only(array) -> np.ndarray:
    array = np.array(array, dtype=float)
    array.setflags(write=False)
    return array


class ButcherTableau:
    """
    Representation of the Butcher tableau of an explicit Runge-Kutta method.

    The stages of the scheme are
        K^s = R(t^n + gamma^s dt, U^n + dt sum_{i<s} alpha^{s,i} K^i)
    and the step is
        U^{n+1} = U^n + dt sum_s beta^s K^s.

    The coefficient arrays are copied on construction and are read-only afterwards,
    so one tableau can be shared by any number of integrations.

    Attributes
    ----------

    butcher_matrix : np.ndarray
        The runge kutta matrix (alpha) of the Butcher tableau.
    butcher_weight_vector : np.ndarray
        The weight vector (beta) of the Butcher tableau.
    butcher_time_stages: np.ndarray, optional
        The time stages (gamma) of the Butcher tableau. Computed as row sums of the
        matrix if not given.
    p: int, optional
        The order of the global truncation error of the Butcher tableau.
    name: str, optional
        the name of the Butcher tableau.

    Methods
    -------
    number_of_stages()
        Returns the number of stages of the Butcher tableau.
    is_explicit()
        Returns whether the Butcher matrix is strictly lower triangular.
    is_consistent()
        Returns whether the time stages are the row sums of the Butcher matrix.
    weights_sum_to_one()
        Returns whether the weights sum up to one.
    is_valid()
        Returns whether all three of the above hold.
    """

    def __init__(
        self,
        butcher_matrix: np.ndarray,
        butcher_weight_vector: np.ndarray,
        butcher_time_stages: np.ndarray | None = None,
        p=None,
        name="Runge-Kutta method",
    ):
        if len(np.shape(butcher_matrix)) == 2:
            self.butcher_matrix = _read_only(butcher_matrix)
        else:
            self.butcher_matrix = _read_only([butcher_matrix])
        self.butcher_weight_vector = _read_only(butcher_weight_vector)
        if np.abs(np.sum(self.butcher_weight_vector) - 1.0) > 1e-5:
            warnings.warn("Averaging weights do not sum up to 1")
        if butcher_time_stages is None:
            self.butcher_time_stages = _read_only(np.sum(self.butcher_matrix, 1))
        else:
            self.butcher_time_stages = _read_only(butcher_time_stages)
            if np.shape(self.butcher_time_stages) == (
                np.size(self.butcher_matrix, 0),
            ) and np.any(
                np.abs(np.sum(self.butcher_matrix, 1) - self.butcher_time_stages)
                > 1e-5
            ):
                warnings.warn(
                    "Spatial shift matrix (A) rows do not "
                    "sum up to the temporal shift vector (c) indices value"
                )
        self.stages = self.butcher_weight_vector.size
        self.name = name
        self._p = p
        if (
            self.butcher_matrix.shape != (self.stages, self.stages)
            or self.butcher_weight_vector.shape != self.butcher_time_stages.shape
        ):
            raise AssertionError("Sizes of matrix and vectors doesn't match")

    @property
    def p(self):
        if self._p is None:
            raise ValueError("Order is unknown, please specify the order")
        return self._p

    @property
    def alpha(self) -> np.ndarray:
        return self.butcher_matrix

    @property
    def beta(self) -> np.ndarray:
        return self.butcher_weight_vector

    @property
    def gamma(self) -> np.ndarray:
        return self.butcher_time_stages

    def number_of_stages(self):
        """
        Returns the number of stages of the tableau
        Return
        ------
        int
            The number of stages of the butcher tableau.
        """
        return self.stages

    def is_explicit(self) -> bool:
        """
        Returns whether this tableau is explicit.
        Return
        ------
        bool
            True if the Butcher tableau is explicit.
        """
        for i in range(self.stages):
            for j in range(i, self.stages):
                if self.butcher_matrix[i, j] != 0.0:
                    return False
        return True

    def is_consistent(self, tol: float = 1e-12) -> bool:
        """
        Returns whether every time stage equals the row sum of the Butcher matrix.

        Parameters
        ----------
        tol: float, optional
            Absolute tolerance of the comparison.

        Return
        ------
        bool
            True if gamma^s = sum_i alpha^{s,i} for every stage s.
        """
        return bool(
            np.all(
                np.abs(np.sum(self.butcher_matrix, 1) - self.butcher_time_stages)
                <= tol
            )
        )

    def weights_sum_to_one(self, tol: float = 1e-10) -> bool:
        """Returns whether the weight vector sums up to one. The default tolerance
        admits weights given to 14 significant digits."""
        return bool(np.abs(np.sum(self.butcher_weight_vector) - 1.0) <= tol)

    def is_valid(self, tol: float = 1e-10) -> bool:
        """Returns whether the tableau is explicit, consistent and has unit weight sum."""
        return (
            self.is_explicit()
            and self.is_consistent(tol)
            and self.weights_sum_to_one(tol)
        )

    def __len__(self) -> int:
        """
        Returns the number of rows of the Butcher matrix.

        Returns
        -------
        int
            Number of rows of the Butcher matrix.
        """
        return np.size(self.butcher_matrix, 0)

    def __eq__(self, other):
        if not isinstance(other, ButcherTableau):
            return NotImplemented
        return (
            self.stages == other.stages
            and np.array_equal(self.butcher_matrix, other.butcher_matrix)
            and np.array_equal(self.butcher_weight_vector, other.butcher_weight_vector)
            and np.array_equal(self.butcher_time_stages, other.butcher_time_stages)
        )

    def __hash__(self):
        return hash((self.stages, self.butcher_weight_vector.tobytes()))

    def __repr__(self):
        return f"ButcherTableau(name={self.name!r}, stages={self.stages}, p={self._p})"

    def __str__(self):
        """
        Returns the Butcher table as a string

        Returns:
            Butcher table as a string.
        """
        butcher_time_stages = np.array(
            [str(element) for element in self.butcher_time_stages]
        )
        butcher_matrix = np.array(
            [[str(element) for element in lst] for lst in self.butcher_matrix]
        )
        butcher_weight_vector = np.array(
            [str(element) for element in self.butcher_weight_vector]
        )
        _, col_max = _get_column_widths(
            [butcher_matrix, butcher_weight_vector, butcher_time_stages]
        )

        s = self.name + "\n"
        for i in range(len(self)):
            s += butcher_time_stages[i].ljust(col_max + 1) + "|"
            for j in range(len(self)):
                s += butcher_matrix[i, j].ljust(col_max + 1)
            s = s.rstrip() + "\n"
        s += "_" * (col_max + 1) + "|" + ("_" * (col_max + 1) * len(self)) + "\n"
        s += " " * (col_max + 1) + "|"
        for j in range(len(self)):
            s += butcher_weight_vector[j].ljust(col_max + 1)
        return s.rstrip()
