"""Typer command line interface"""
