from pydantic import BaseModel


class TreeConfig(BaseModel):
    # Written after every element of a traversal, including the last one
    separator: str = "  "
    # Columns added per tree level by the sideways graph printer
    indent_step: int = 8
    # Drawn in the graph wherever a child link is empty
    placeholder: str = "_"
    # Report inserts and removals to the console
    verbose: bool = False
