import logging
from typing import Dict, Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from gardenctl.errors import ClusterConfigError, KubeconfigError

logger = logging.getLogger(__name__)


def current_context(kubeconfig: str) -> str:
    """
    Return the name of the current-context of a kubeconfig file.
    """
    try:
        _, active = config.list_kube_config_contexts(config_file=kubeconfig)
    except (ConfigException, OSError) as e:
        raise KubeconfigError(f"failed to load kubeconfig file {kubeconfig!r}: {e}") from e

    name = (active or {}).get("name")
    if not name:
        raise KubeconfigError(f"no current context found for kubeconfig {kubeconfig!r}")
    return name


def download_cluster_config(kubeconfig: str, context: str, name: str, namespace: str) -> Optional[Dict[str, str]]:
    """
    Read the cluster config ConfigMap from the garden cluster.
    Returns None if the ConfigMap does not exist.
    """
    try:
        api_client = config.new_client_from_config(config_file=kubeconfig, context=context)
    except (ConfigException, OSError) as e:
        raise ClusterConfigError(f"failed to create client for cluster configuration download: {e}") from e

    api = client.CoreV1Api(api_client)
    logger.debug(f"Downloading cluster config {namespace}/{name} using context {context}")
    try:
        config_map = api.read_namespaced_config_map(name=name, namespace=namespace)
    except ApiException as e:
        if e.status == 404:
            logger.debug(f"Cluster config {namespace}/{name} not found")
            return None
        raise ClusterConfigError(f"failed to download cluster configuration: {e.reason}") from e
    except (HTTPError, OSError) as e:
        raise ClusterConfigError(f"failed to download cluster configuration: {e}") from e

    return config_map.data or {}
