"""Command line interface for camunda-deploy"""
