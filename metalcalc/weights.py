# Metal weight constants: densities per EN 10025 / supplier data sheets,
# linear masses per EN 10365 (hot rolled I, H and U sections)

# Reference density for the linear-mass tables below (structural steel, g/cm³)
REFERENCE_DENSITY = 7.85

# Densities (g/cm³) with display names per language
MATERIALS = {
    "steel": {"density": 7.85, "names": {"en": "Steel", "bs": "Čelik"}},
    "stainlesssteel": {"density": 8.0, "names": {"en": "Stainless Steel", "bs": "Nehrđajući čelik"}},
    "aluminum": {"density": 2.7, "names": {"en": "Aluminum", "bs": "Aluminijum"}},
    "copper": {"density": 8.96, "names": {"en": "Copper", "bs": "Bakar"}},
    "brass": {"density": 8.5, "names": {"en": "Brass", "bs": "Mesing"}},
    "titanium": {"density": 4.5, "names": {"en": "Titanium", "bs": "Titanijum"}},
    "zinc": {"density": 7.13, "names": {"en": "Zinc", "bs": "Cink"}},
    "lead": {"density": 11.34, "names": {"en": "Lead", "bs": "Olovo"}},
    "nickel": {"density": 8.9, "names": {"en": "Nickel", "bs": "Nikal"}},
}

DENSITIES = {key: data["density"] for key, data in MATERIALS.items()}

# Standard profile linear mass (kg/m) in steel
PROFILE_WEIGHTS = {
    # IPE: European I-beam
    "IPE 80": 6.0,
    "IPE 100": 8.1,
    "IPE 120": 10.4,
    "IPE 140": 12.9,
    "IPE 160": 15.8,
    "IPE 180": 18.8,
    "IPE 200": 22.4,
    "IPE 220": 26.2,
    "IPE 240": 30.7,
    "IPE 270": 36.1,
    "IPE 300": 42.2,
    "IPE 330": 49.1,
    "IPE 360": 57.1,
    "IPE 400": 66.3,
    "IPE 450": 77.6,
    "IPE 500": 90.7,
    "IPE 550": 106.0,
    "IPE 600": 122.0,
    # IPN: European standard I-beam (catalog designation "INP")
    "INP 80": 5.94,
    "INP 100": 8.34,
    "INP 120": 11.1,
    "INP 140": 14.3,
    "INP 160": 17.9,
    "INP 180": 21.9,
    "INP 200": 26.2,
    "INP 220": 31.1,
    "INP 240": 36.2,
    "INP 260": 41.9,
    "INP 280": 47.9,
    "INP 300": 54.2,
    "INP 320": 61.0,
    "INP 340": 68.0,
    "INP 360": 76.1,
    "INP 380": 84.0,
    "INP 400": 92.4,
    "INP 450": 115.0,
    "INP 500": 141.0,
    "INP 550": 166.0,
    "INP 600": 199.0,
    # UPN: European standard channel
    "UPN 80": 8.64,
    "UPN 100": 10.6,
    "UPN 120": 13.4,
    "UPN 140": 16.0,
    "UPN 160": 18.8,
    "UPN 180": 22.0,
    "UPN 200": 25.3,
    "UPN 220": 29.4,
    "UPN 240": 33.2,
    "UPN 260": 37.9,
    "UPN 280": 41.8,
    "UPN 300": 46.2,
    "UPN 320": 59.5,
    "UPN 350": 60.6,
    "UPN 380": 63.1,
    "UPN 400": 71.8,
    # HEA: European wide flange beam, light series
    "HEA 100": 16.7,
    "HEA 120": 19.9,
    "HEA 140": 24.7,
    "HEA 160": 30.4,
    "HEA 180": 35.5,
    "HEA 200": 42.3,
    "HEA 220": 50.5,
    "HEA 240": 60.3,
    "HEA 260": 68.2,
    "HEA 280": 76.4,
    "HEA 300": 88.3,
    "HEA 320": 97.6,
    "HEA 340": 105.0,
    "HEA 360": 112.0,
    "HEA 400": 125.0,
    "HEA 450": 140.0,
    "HEA 500": 155.0,
    "HEA 550": 166.0,
    "HEA 600": 178.0,
    "HEA 650": 190.0,
    "HEA 700": 204.0,
    "HEA 800": 224.0,
    "HEA 900": 252.0,
    "HEA 1000": 272.0,
    # HEB: European wide flange beam, standard series
    "HEB 100": 20.4,
    "HEB 120": 26.7,
    "HEB 140": 33.7,
    "HEB 160": 42.6,
    "HEB 180": 51.2,
    "HEB 200": 61.3,
    "HEB 220": 71.5,
    "HEB 240": 83.2,
    "HEB 260": 93.0,
    "HEB 280": 103.0,
    "HEB 300": 117.0,
    "HEB 320": 127.0,
    "HEB 340": 134.0,
    "HEB 360": 142.0,
    "HEB 400": 155.0,
    "HEB 450": 171.0,
    "HEB 500": 187.0,
    "HEB 550": 199.0,
    "HEB 600": 212.0,
    "HEB 650": 225.0,
    "HEB 700": 241.0,
    "HEB 800": 262.0,
    "HEB 900": 291.0,
    "HEB 1000": 314.0,
}

# Profile families: key -> (display name, designation prefix)
PROFILE_FAMILIES = {
    "ipe": ("IPE (European I-Beam)", "IPE"),
    "ipn": ("IPN (European Standard I-Beam)", "INP"),
    "upn": ("UPN (European Standard Channel)", "UPN"),
    "hea": ("HEA (European Wide Flange Beam)", "HEA"),
    "heb": ("HEB (European Wide Flange Beam)", "HEB"),
}


def weight_from_volume(volume_cm3: float, density: float) -> float:
    """Weight in kg from a volume in cm³ and a density in g/cm³."""
    return volume_cm3 * density / 1000.0


def weight_from_profile(kg_per_m: float, length_m: float, density: float = REFERENCE_DENSITY) -> float:
    """
    Weight in kg of a catalog profile.
    Linear masses are tabulated for steel; other materials are scaled by density ratio.
    """
    return kg_per_m * length_m * (density / REFERENCE_DENSITY)
