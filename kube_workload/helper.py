from typing import Optional

import pykube


def get_kube_api(kubeconfig: Optional[str] = None, context: Optional[str] = None):
    if kubeconfig:
        config = pykube.KubeConfig.from_file(kubeconfig)
    else:
        config = pykube.KubeConfig.from_env()
    if context:
        config.set_current_context(context)
    api = pykube.HTTPClient(config)
    return api
