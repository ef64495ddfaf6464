"""Toolkit defaults and the themes package"""
