"""Routing — ordered route table with first-match-wins scanning.

Routes are appended during a startup registration phase and scanned
read-only while serving.
"""
