"""
Analysis of Lit element classes: reactive property declarations in all of
their authoring styles.
"""
