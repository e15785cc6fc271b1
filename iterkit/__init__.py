"""Iterator tools: grouping maps, intersperse, k-way merge, k-smallest selection and lazy buffers."""

__version__ = "0.1.0"

__all__ = ["grouping_map", "intersperse", "k_smallest", "kmerge", "lazy_buffer"]