from typing import List, Tuple

Cell = Tuple[int, int]
Grid = List[List[int]]
