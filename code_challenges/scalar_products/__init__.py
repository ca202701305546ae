"""Two solutions to the Scalar Products challenge: a direct walk and a matrix-power one."""

__all__ = ["approach1", "approach2"]