"""
IAPWS-IF97 region equations.

Region 3 density inversion uses numpy for the grid scan and scipy brentq for the root.

Provides, for p in MPa and T in K, returning SI units
(h [J/kg], v [m3/kg], s [J/(kg*K)]):
    - _region1(p, T): compressed liquid (Gibbs free energy)
    - _region2(p, T): superheated vapour (Gibbs free energy, ideal + residual)
    - _region3(p, T, liquid): dense fluid near the critical point (Helmholtz free energy)
    - _region5(p, T): high temperature vapour (Gibbs free energy, ideal + residual)
    - _psat_mpa(T), _sat_series(theta), _sat_series_dtheta(theta): saturation line
    - _p_b23(T), _t_b23(p): Region 2 / Region 3 boundary

Reference:
    Wagner, W. et al. (2000). "The IAPWS Industrial Formulation 1997
    for the Thermodynamic Properties of Water and Steam."
    ASME J. Eng. Gas Turbines Power, 122(1), 150-182.
    IAPWS R7-97(2012), Revised Release on the IAPWS Industrial Formulation 1997.
    Wagner, W. & Pruss, A. (1993). J. Phys. Chem. Ref. Data 22, 783 (saturation pressure).
"""

import math
import numpy as np
from scipy.optimize import brentq

from steamtoolbox.constants import R_WATER, TC_K, PC_MPA, RHOC
from steamtoolbox.errors import NonConvergentError

# ============================================================================
# Region 1 (Table 2 of IAPWS-IF97)
# Each row: (I_i, J_i, n_i)
# ============================================================================

R1_PSTAR = 16.53         # Reference pressure [MPa]
R1_TSTAR = 1386.0        # Reference temperature [K]

_REGION1_IJN = [
    (0,  -2,   0.14632971213167e+00),
    (0,  -1,  -0.84548187169114e+00),
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
    (8, -11,  -0.12734301741641e-08),
    (8,  -6,  -0.17424871230634e-09),
    (21, -29, -0.68762131295531e-18),
    (23, -31,  0.14478307828521e-19),
    (29, -38,  0.26335781662795e-22),
    (30, -39, -0.11947622640071e-22),
    (31, -40,  0.18228094581404e-23),
    (32, -41, -0.93537087292458e-25),
]

# ============================================================================
# Region 2 (Tables 10 and 11 of IAPWS-IF97)
# Ideal gas part rows: (J0_i, n0_i). Residual part rows: (I_i, J_i, n_i)
# ============================================================================

R2_PSTAR = 1.0           # [MPa]
R2_TSTAR = 540.0         # [K]

_REGION2_J0N0 = [
    (0,  -0.96927686500217e+01),
    (1,   0.10086655968018e+02),
    (-5, -0.56087911283020e-02),
    (-4,  0.71452738081455e-01),
    (-3, -0.40710498223928e+00),
    (-2,  0.14240819171444e+01),
    (-1, -0.43839511319450e+01),
    (2,  -0.28408632460772e+00),
    (3,   0.21268463753307e-01),
]

_REGION2_IJN = [
    (1,   0,  -0.17731742473213e-02),
    (1,   1,  -0.17834862292358e-01),
    (1,   2,  -0.45996013696365e-01),
    (1,   3,  -0.57581259083432e-01),
    (1,   6,  -0.50325278727930e-01),
    (2,   1,  -0.33032641670203e-04),
    (2,   2,  -0.18948987516315e-03),
    (2,   4,  -0.39392777243355e-02),
    (2,   7,  -0.43797295650573e-01),
    (2,  36,  -0.26674547914087e-04),
    (3,   0,   0.20481737692309e-07),
    (3,   1,   0.43870667284435e-06),
    (3,   3,  -0.32277677238570e-04),
    (3,   6,  -0.15033924542148e-02),
    (3,  35,  -0.40668253562649e-01),
    (4,   1,  -0.78847309559367e-09),
    (4,   2,   0.12790717852285e-07),
    (4,   3,   0.48225372718507e-06),
    (5,   7,   0.22922076337661e-05),
    (6,   3,  -0.16714766451061e-10),
    (6,  16,  -0.21171472321355e-02),
    (6,  35,  -0.23895741934104e+02),
    (7,   0,  -0.59059564324270e-17),
    (7,  11,  -0.12621808899101e-05),
    (7,  25,  -0.38946842435739e-01),
    (8,   8,   0.11256211360459e-10),
    (8,  36,  -0.82311340897998e+01),
    (9,  13,   0.19809712802088e-07),
    (10,  4,   0.10406965210174e-18),
    (10, 10,  -0.10234747095929e-12),
    (10, 14,  -0.10018179379511e-08),
    (16, 29,  -0.80882908646985e-10),
    (16, 50,   0.10693031879409e+00),
    (18, 57,  -0.33662250574171e+00),
    (20, 20,   0.89185845355421e-24),
    (20, 35,   0.30629316876232e-12),
    (20, 48,  -0.42002467698208e-05),
    (21, 21,  -0.59056029685639e-25),
    (22, 53,   0.37826947613457e-05),
    (23, 39,  -0.12768608934681e-14),
    (24, 26,   0.73087610595061e-28),
    (24, 40,   0.55414715350778e-16),
    (24, 58,  -0.94369707241210e-06),
]

# ============================================================================
# Region 3 (Table 30 of IAPWS-IF97)
# n1 multiplies ln(delta); remaining rows: (I_i, J_i, n_i)
# ============================================================================

_REGION3_N1 = 0.10658070028513e+01

_REGION3_IJN = [
    (0,   0,  -0.15732845290239e+02),
    (0,   1,   0.20944396974307e+02),
    (0,   2,  -0.76867707878716e+01),
    (0,   7,   0.26185947787954e+01),
    (0,  10,  -0.28080781148620e+01),
    (0,  12,   0.12053369696517e+01),
    (0,  23,  -0.84566812812502e-02),
    (1,   2,  -0.12654315477714e+01),
    (1,   6,  -0.11524407806681e+01),
    (1,  15,   0.88521043984318e+00),
    (1,  17,  -0.64207765181607e+00),
    (2,   0,   0.38493460186671e+00),
    (2,   2,  -0.85214708824206e+00),
    (2,   6,   0.48972281541877e+01),
    (2,   7,  -0.30502617256965e+01),
    (2,  22,   0.39420536879154e-01),
    (2,  26,   0.12558408424308e+00),
    (3,   0,  -0.27999329698710e+00),
    (3,   2,   0.13899799569460e+01),
    (3,   4,  -0.20189915023570e+01),
    (3,  16,  -0.82147637173963e-02),
    (3,  26,  -0.47596035734923e+00),
    (4,   0,   0.43984074473500e-01),
    (4,   2,  -0.44476435428739e+00),
    (4,   4,   0.90572070719733e+00),
    (4,  26,   0.70522450087967e+00),
    (5,   1,   0.10770512626332e+00),
    (5,   3,  -0.32913623258954e+00),
    (5,  26,  -0.50871062041158e+00),
    (6,   0,  -0.22175400873096e-01),
    (6,   2,   0.94260751665092e-01),
    (6,  26,   0.16436278447961e+00),
    (7,   2,  -0.13503372241348e-01),
    (8,  26,  -0.14834345352472e-01),
    (9,   2,   0.57922953628084e-03),
    (9,  26,   0.32308904703711e-02),
    (10,  0,   0.80964802996215e-04),
    (10,  1,  -0.16557679795037e-03),
    (11, 26,  -0.44923899061815e-04),
]

# Density scan for the Region 3 p(rho, T) inversion [kg/m3]
_RHO_GRID = np.linspace(50.0, 1000.0, 951)

# ============================================================================
# Region 5 (Tables 37 and 38 of IAPWS R7-97(2012))
# ============================================================================

R5_PSTAR = 1.0           # [MPa]
R5_TSTAR = 1000.0        # [K]

_REGION5_J0N0 = [
    (0,  -0.13179983674201e+02),
    (1,   0.68540841634434e+01),
    (-3, -0.24805148933466e-01),
    (-2,  0.36901534980333e+00),
    (-1, -0.31161318213925e+01),
    (2,  -0.32961626538917e+00),
]

_REGION5_IJN = [
    (1,  1,   0.15736404855259e-02),
    (1,  2,   0.90153761673944e-03),
    (1,  3,  -0.50270077677648e-02),
    (2,  3,   0.22440037409485e-05),
    (2,  9,  -0.41163275453471e-05),
    (3,  7,   0.37919454822955e-07),
]

# ============================================================================
# Saturation line: ln(p/pc) = (Tc/T) * sum( n_i * theta^e_i ), theta = 1 - T/Tc
# ============================================================================

_SAT_NE = [
    (-7.85951783, 1.0),
    (1.84408259,  1.5),
    (-11.7866497, 3.0),
    (22.6807411,  3.5),
    (-15.9618719, 4.0),
    (1.80122502,  7.5),
]

# ============================================================================
# B23 boundary (Table 1 of IAPWS-IF97)
# ============================================================================

_B23_N = [
    0.34805185628969e+03,
    -0.11671859879975e+01,
    0.10192970039326e-02,
    0.57254459862746e+03,
    0.13918839778870e+02,
]


def _sat_series(theta):
    return sum(n * theta ** e for n, e in _SAT_NE)


def _sat_series_dtheta(theta):
    return sum(n * e * theta ** (e - 1.0) for n, e in _SAT_NE)


def _psat_mpa(T):
    """ Saturation pressure [MPa] at T [K], 0 < T <= Tc """
    theta = 1.0 - T / TC_K
    return PC_MPA * math.exp(TC_K / T * _sat_series(theta))


def _p_b23(T):
    """ Region 2/3 boundary pressure [MPa] at T [K] """
    return _B23_N[0] + _B23_N[1] * T + _B23_N[2] * T * T


def _t_b23(p):
    """ Region 2/3 boundary temperature [K] at p [MPa] """
    return _B23_N[3] + math.sqrt((p - _B23_N[4]) / _B23_N[2])


def _region1(p, T):
    """
    gamma = sum( n_i * (7.1 - pi)^I_i * (tau - 1.222)^J_i )

    v = R*T*pi*gamma_pi / p
    h = R*T*tau*gamma_tau
    s = R*(tau*gamma_tau - gamma)
    """
    pi = p / R1_PSTAR
    tau = R1_TSTAR / T
    a = 7.1 - pi
    b = tau - 1.222

    g = 0.0
    gp = 0.0
    gt = 0.0
    for I, J, n in _REGION1_IJN:
        aI = a ** I
        bJ = b ** J
        g += n * aI * bJ
        if I != 0:
            gp -= n * I * (aI / a) * bJ
        if J != 0:
            gt += n * aI * J * (bJ / b)

    v = R_WATER * T * pi * gp / (p * 1e6)
    h = R_WATER * T * tau * gt
    s = R_WATER * (tau * gt - g)
    return h, v, s


def _gibbs_ideal_residual(p, T, pstar, tstar, j0n0, ijn, tau_shift):
    # Shared Region 2 / Region 5 form: gamma = gamma0(pi, tau) + gammar(pi, tau - tau_shift)
    pi = p / pstar
    tau = tstar / T

    g0 = math.log(pi)
    g0t = 0.0
    for J, n in j0n0:
        g0 += n * tau ** J
        g0t += n * J * tau ** (J - 1)

    b = tau - tau_shift
    gr = 0.0
    grp = 0.0
    grt = 0.0
    for I, J, n in ijn:
        pI = pi ** I
        bJ = b ** J
        gr += n * pI * bJ
        grp += n * I * (pI / pi) * bJ
        if J != 0:
            grt += n * pI * J * (bJ / b)

    v = R_WATER * T * (1.0 + pi * grp) / (p * 1e6)
    h = R_WATER * T * tau * (g0t + grt)
    s = R_WATER * (tau * (g0t + grt) - (g0 + gr))
    return h, v, s


def _region2(p, T):
    return _gibbs_ideal_residual(p, T, R2_PSTAR, R2_TSTAR, _REGION2_J0N0, _REGION2_IJN, 0.5)


def _region5(p, T):
    return _gibbs_ideal_residual(p, T, R5_PSTAR, R5_TSTAR, _REGION5_J0N0, _REGION5_IJN, 0.0)


def _region3_pressure(rho, T):
    """ p [MPa] from rho [kg/m3] and T [K]. Accepts a numpy array of densities """
    delta = rho / RHOC
    tau = TC_K / T
    fd = _REGION3_N1 / delta
    for I, J, n in _REGION3_IJN:
        if I != 0:
            fd = fd + n * I * delta ** (I - 1) * tau ** J
    return rho * R_WATER * T * delta * fd / 1e6


def _region3_density(p, T, liquid=None):
    """
    Density [kg/m3] at p [MPa], T [K] by inverting p(rho, T).

    liquid: True for the liquid-like branch (rho > rhoc), False for the vapour-like
            branch (rho < rhoc), None above the critical temperature

    Just below Tc the two branches can merge inside one grid cell. A branch with
    no crossing of its own then takes the crossing nearest rhoc.
    """
    f = _region3_pressure(_RHO_GRID, T) - p
    up = np.nonzero((f[:-1] < 0) & (f[1:] >= 0))[0]
    if len(up) == 0:
        raise NonConvergentError(f"No Region 3 density found for p={p} MPa, T={T} K")
    if liquid is True:
        branch = up[_RHO_GRID[up + 1] > RHOC]
    elif liquid is False:
        branch = up[_RHO_GRID[up] < RHOC]
    else:
        branch = up
    if len(branch) == 0:
        i = up[np.argmin(np.abs(_RHO_GRID[up] + 0.5 - RHOC))]
    else:
        i = branch[0]
    return brentq(lambda rho: _region3_pressure(rho, T) - p,
                  _RHO_GRID[i], _RHO_GRID[i + 1], xtol=1e-12)


def _region3(p, T, liquid=None):
    """
    phi = n1*ln(delta) + sum( n_i * delta^I_i * tau^J_i ), delta = rho/rhoc, tau = Tc/T

    h = R*T*(tau*phi_tau + delta*phi_delta)
    s = R*(tau*phi_tau - phi)
    """
    if liquid is None and T < TC_K:
        liquid = p >= _psat_mpa(T)
    rho = _region3_density(p, T, liquid)
    delta = rho / RHOC
    tau = TC_K / T

    phi = _REGION3_N1 * math.log(delta)
    fd = _REGION3_N1 / delta
    ft = 0.0
    for I, J, n in _REGION3_IJN:
        dI = delta ** I
        tJ = tau ** J
        phi += n * dI * tJ
        if I != 0:
            fd += n * I * (dI / delta) * tJ
        if J != 0:
            ft += n * dI * J * (tJ / tau)

    h = R_WATER * T * (tau * ft + delta * fd)
    s = R_WATER * (tau * ft - phi)
    return h, 1.0 / rho, s
