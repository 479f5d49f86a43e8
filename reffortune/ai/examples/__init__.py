"""Few-shot example packs and the example selector."""
