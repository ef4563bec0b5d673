"""
IAPWS equations for pure water used by the H2O component.

Provides:
    - rho_if97(T, P): compressed liquid density from IAPWS-IF97 Region 1, kg/m3
    - psat_if97(T): saturation (vapor) pressure from IAPWS-IF97 Region 4, MPa
    - visc_iapws08(T, rho): dynamic viscosity from IAPWS 2008, Pa.s

The equations use arithmetic, powers and np.exp only, so they accept floats,
numpy scalars of any width, numpy arrays and automatic differentiation numbers.
Nothing is range checked.

Valid range (Region 1):
    273.15 K <= T <= 623.15 K  (0-350 C)
    P_sat(T) <= P <= 100 MPa

References:
    Wagner, W. et al. (2000). "The IAPWS Industrial Formulation 1997
    for the Thermodynamic Properties of Water and Steam."
    ASME J. Eng. Gas Turbines Power, 122(1), 150-182.

    Huber, M.L. et al. (2009). "New International Formulation for the
    Viscosity of H2O." J. Phys. Chem. Ref. Data, 38(2), 101-125.

Units: T in K, P in MPa
"""

import numpy as np

# Constants
R_SPECIFIC = 461.526e-6  # Specific gas constant for water [MPa*m3/(kg*K)]
P_STAR = 16.53           # Region 1 reference pressure [MPa]
T_STAR = 1386.0          # Region 1 reference temperature [K]
T_CRIT = 647.096         # Critical temperature [K]
RHO_CRIT = 322.0         # Critical density [kg/m3]
MU_STAR = 1e-6           # Viscosity reference [Pa.s]

# Region 1 coefficients (Table 2 of IAPWS-IF97)
# Each row: (I_i, J_i, n_i)
_REGION1_IJN = [
    (0,  -2,   0.14632971213167e+00),
    (0,  -1,  -0.84548187389013e+00),
    (0,   0,  -0.37563603672040e+01),
    (0,   1,   0.33855169168385e+01),
    (0,   2,  -0.95791963387872e+00),
    (0,   3,   0.15772038513228e+00),
    (0,   4,  -0.16616417199501e-01),
    (0,   5,   0.81214629983568e-03),
    (1,  -9,   0.28319080123804e-03),
    (1,  -7,  -0.60706301565874e-03),
    (1,  -1,  -0.18990068218419e-01),
    (1,   0,  -0.32529748770505e-01),
    (1,   1,  -0.21841717175414e-01),
    (1,   3,  -0.52838357969930e-04),
    (2,  -3,  -0.47184321073267e-03),
    (2,   0,  -0.30001780793026e-03),
    (2,   1,   0.47661393906987e-04),
    (2,   3,  -0.44141845330846e-05),
    (2,  17,  -0.72694996297594e-15),
    (3,  -4,  -0.31679644845054e-04),
    (3,   0,  -0.28270797985312e-05),
    (3,   6,  -0.85205128120103e-09),
    (4,  -5,  -0.22425281908000e-05),
    (4,  -2,  -0.65171222895601e-06),
    (4,  10,  -0.14341729937924e-12),
    (5,  -8,  -0.40516996860117e-06),
    (8, -11,  -0.12734301741682e-08),
    (8,  -6,  -0.17424871230634e-09),
    (21, -29, -0.68762131295531e-18),
    (23, -31,  0.14478307828521e-19),
    (29, -38,  0.26335781662795e-22),
    (30, -39, -0.11947622640071e-22),
    (31, -40,  0.18228094581404e-23),
    (32, -41, -0.93537087292458e-25),
]

# Region 4 saturation-pressure coefficients (Table 34 of IAPWS-IF97)
_REGION4_N = [
    0.11670521452767e+04, -0.72421316598840e+06, -0.17073846940092e+02,
    0.12020824702470e+05, -0.32325550322333e+07,  0.14915108613530e+02,
    -0.48232657361591e+04, 0.40511340542057e+06, -0.23855557567849e+00,
    0.65017534844798e+03,
]

# IAPWS 2008 viscosity, dilute gas term (Table 1)
_VISC_H0 = [1.67752, 2.20462, 0.6366564, -0.241605]

# IAPWS 2008 viscosity, residual term (Table 2)
# Each row: (i, j, H_ij)
_VISC_HIJ = [
    (0, 0,  5.20094e-1),
    (1, 0,  8.50895e-2),
    (2, 0, -1.08374),
    (3, 0, -2.89555e-1),
    (0, 1,  2.22531e-1),
    (1, 1,  9.99115e-1),
    (2, 1,  1.88797),
    (3, 1,  1.26613),
    (5, 1,  1.20573e-1),
    (0, 2, -2.81378e-1),
    (1, 2, -9.06851e-1),
    (2, 2, -7.72479e-1),
    (3, 2, -4.89837e-1),
    (4, 2, -2.57040e-1),
    (0, 3,  1.61913e-1),
    (1, 3,  2.57399e-1),
    (0, 4, -3.25372e-2),
    (3, 4,  6.98452e-2),
    (4, 5,  8.72102e-3),
    (3, 6, -4.35673e-3),
    (5, 6, -5.93264e-4),
]


def _gamma_pi(pi, tau):
    """
    Derivative of the dimensionless Gibbs free energy of Region 1 with
    respect to reduced pressure.

    gamma = sum( n_i * (7.1 - pi)^I_i * (tau - 1.222)^J_i )
    """
    a = 7.1 - pi
    b = tau - 1.222

    gp = 0.0
    for I, J, n in _REGION1_IJN:
        if I == 0:
            continue
        elif I == 1:
            gp += -n * b ** J
        else:
            gp += n * (-I) * a ** (I - 1) * b ** J
    return gp


def rho_if97(T, P):
    """
    Pure water density from IAPWS-IF97 Region 1.

    Parameters:
        T: temperature in K (273.15 - 623.15)
        P: pressure in MPa (up to 100)

    Returns:
        density in kg/m3
    """
    pi = P / P_STAR
    tau = T_STAR / T
    return P_STAR / (R_SPECIFIC * T * _gamma_pi(pi, tau))


def psat_if97(T):
    """
    Saturation pressure of water from the IAPWS-IF97 Region 4 equation.

    Parameters:
        T: temperature in K (273.15 - 647.096)

    Returns:
        saturation pressure in MPa
    """
    n = _REGION4_N
    sigma = T + n[8] / (T - n[9])
    A = (sigma + n[0]) * sigma + n[1]
    B = (n[2] * sigma + n[3]) * sigma + n[4]
    C = (n[5] * sigma + n[6]) * sigma + n[7]
    tmp = 2 * C / ((B * B - 4 * A * C) ** 0.5 - B)
    tmp = tmp * tmp
    return tmp * tmp


def visc_iapws08(T, rho):
    """
    Dynamic viscosity of water, IAPWS 2008 formulation without the critical
    enhancement term (negligible outside the immediate vicinity of the
    critical point).

    Parameters:
        T: temperature in K
        rho: density in kg/m3

    Returns:
        viscosity in Pa.s
    """
    Tr = T / T_CRIT
    rhor = rho / RHO_CRIT

    denom = 0.0
    for i, h in enumerate(_VISC_H0):
        denom += h / Tr ** i
    mu0 = 100 * Tr ** 0.5 / denom

    x = 1 / Tr - 1
    y = rhor - 1
    s = 0.0
    for i, j, h in _VISC_HIJ:
        s += h * x ** i * y ** j
    mu1 = np.exp(rhor * s)

    return MU_STAR * mu0 * mu1
