"""Adapters layer (CLI and config)"""
