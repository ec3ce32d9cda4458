"""Neurological Disorders - a single-page Streamlit catalog."""
