"""Document composition, rendering and export services"""
