"""Shipping module labels per locale.

Keys follow ``module.shipping.<moduleCode>`` for the carrier description
(``{0}`` is the store name) and ``.note`` for an optional note. The note
label also names the options of a module that carries option codes.
"""

DEFAULT_BUNDLES = {
    "en": {
        "module.shipping.flatRate": "Standard shipping by {0}",
        "module.shipping.flatRate.note": "Delivered in 3 to 5 business days",
        "module.shipping.weightBased": "Shipping by weight from {0}",
        "module.shipping.storePickUp": "Pick up at {0}",
        "module.shipping.storePickUp.note": "Bring a photo ID to collect your order",
    },
    "fr": {
        "module.shipping.flatRate": "Livraison standard par {0}",
        "module.shipping.flatRate.note": "Livré en 3 à 5 jours ouvrables",
        "module.shipping.weightBased": "Livraison au poids par {0}",
        "module.shipping.storePickUp": "Cueillette chez {0}",
        "module.shipping.storePickUp.note": "Présentez une pièce d'identité pour récupérer votre commande",
    },
}
