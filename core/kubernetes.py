"""
Kubernetes client initialization and utilities
"""
from kubernetes.client.rest import ApiException

from utils.k8s_client import get_k8s_clients


__all__ = ['get_k8s_clients', 'ApiException']
