"""core.models

Catalogue of on-demand chat models offered by OCI Generative AI in the
Ashburn (``iad``) realm. Informational only: any model OCID or name accepted
by OCI can be passed through to the adapter unchanged.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

META_LLAMA_3_1_405B = 'ocid1.generativeaimodel.oc1.iad.amaaaaaask7dceya6pk3sxishpiexm2rb5sf4ytb5tsbz4to2g3g23smidaa'
META_LLAMA_3_1_70B = 'ocid1.generativeaimodel.oc1.iad.amaaaaaa23dgkeya6pk3sxishpiexm2rb5sf4ytb5tsbz4to2g3g23smidaa'
COHERE_COMMAND_R_PLUS = 'ocid1.generativeaimodel.oc1.iad.amaaaaaask7dceybpn7wl7kkisl4mfe7v5mgcq4juqlvfchcjp7nt5xxf2fka'
COHERE_COMMAND_R = 'ocid1.generativeaimodel.oc1.iad.amaaaaaask7dceyb4oegfzv6sk4l6xmf7v5mgcq4juqlvfchcjp7nt5xxf2fka'

DEFAULT_MODEL_ID = META_LLAMA_3_1_405B

#: Display name → model OCID, in the order a host should list them.
SUPPORTED_MODELS: Mapping[str, str] = MappingProxyType(
    {
        'Meta Llama 3.1 405B Instruct': META_LLAMA_3_1_405B,
        'Meta Llama 3.1 70B Instruct': META_LLAMA_3_1_70B,
        'Cohere Command R+': COHERE_COMMAND_R_PLUS,
        'Cohere Command R': COHERE_COMMAND_R,
    },
)


def display_name(model_id: str) -> str:
    """Return the catalogue name for *model_id*, or the id itself if unknown."""
    for name, ocid in SUPPORTED_MODELS.items():
        if ocid == model_id:
            return name
    return model_id
