"""Core: conversion, streaming reduction, embeddings, and the agent loop."""
