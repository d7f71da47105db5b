"""Swapping by reference versus by value"""
from .swap import swap_by_ref, swap_by_val, run_swap_demo

__all__ = ['swap_by_ref', 'swap_by_val', 'run_swap_demo']
