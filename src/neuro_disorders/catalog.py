"""The fixed catalog of neurological disorders shown by the application."""

from .models import Disorder, Icon, ThemeColor

DISORDERS: tuple[Disorder, ...] = (
    Disorder(
        name="Alzheimer's Disease",
        key_characteristic="Progressive cognitive decline and memory loss.",
        neuronal_effect=(
            "Characterized by the loss of neurons and synapses, associated with the "
            "formation of amyloid plaques and tau tangles, disrupting overall brain function."
        ),
        icon=Icon.BRAIN_PROFILE,
        theme_color=ThemeColor.BLUE,
    ),
    Disorder(
        name="Parkinson's Disease",
        key_characteristic="Tremor, muscle rigidity, and difficulty with movement.",
        neuronal_effect=(
            "Caused by the progressive loss of dopamine-producing (dopaminergic) neurons "
            "in a midbrain area called the substantia nigra."
        ),
        icon=Icon.FIGURE_WALK,
        theme_color=ThemeColor.PURPLE,
    ),
    Disorder(
        name="Multiple Sclerosis (MS)",
        key_characteristic="Varied symptoms including fatigue, weakness, and vision problems.",
        neuronal_effect=(
            "An autoimmune disorder where the body's immune system attacks and damages the "
            "myelin sheath (demyelination) in the Central Nervous System, impairing signal "
            "conduction."
        ),
        icon=Icon.BOLT_CLOUD,
        theme_color=ThemeColor.ORANGE,
    ),
    Disorder(
        name="Myasthenia Gravis",
        key_characteristic="Fluctuating muscle weakness and fatigue during simple activities.",
        neuronal_effect=(
            "An autoimmune condition where antibodies block or destroy acetylcholine "
            "receptors at the neuromuscular junction, inhibiting muscle activation."
        ),
        icon=Icon.PERSON_QUESTION,
        theme_color=ThemeColor.TEAL,
    ),
    Disorder(
        name="Charcot-Marie-Tooth",
        key_characteristic="Muscle wasting and loss of touch sensation, primarily in the limbs.",
        neuronal_effect=(
            "A group of inherited disorders caused by mutations affecting the proteins "
            "involved in the structure and function of peripheral nerve axons or the "
            "myelin sheath."
        ),
        icon=Icon.HAND_DRAW,
        theme_color=ThemeColor.GREEN,
    ),
)


def get_disorders() -> tuple[Disorder, ...]:
    """Return the full catalog in display order."""
    return DISORDERS
