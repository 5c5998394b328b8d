"""Rendering subpackage.

Turns immutable ``State`` snapshots into visual representations:

* :mod:`maze_puzzle.renderer.text` - one glyph per cell for the console
    (emoji or plain ASCII glyph sets).
* :mod:`maze_puzzle.renderer.texture` - Pillow RGBA images for the Gymnasium
    environment and the Streamlit app.

Both use the precedence defined in :mod:`maze_puzzle.utils.render`.
"""
