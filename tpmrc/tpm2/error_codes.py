#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Message tables of TPM 2.0 response codes.

The same narrow code means different things in each table, a code is only
meaningful together with the table it indexes.
"""

from tpmrc.utils.rc_enum import RcEnum

UNKNOWN_CODE = "unknown error code"

########################################################################################################################
# Format-zero error codes
########################################################################################################################

# cspell:ignore CPHASH, AUTHSIZE, KEYSIZE, ECC_POINT
# pylint: disable=line-too-long
# fmt: off
class Fmt0Code(RcEnum):
    """Format-zero error codes, general errors not tied to a command field."""

    INITIALIZE          = (0x00, "TPM_RC_INITIALIZE", "TPM not initialized by TPM2_Startup or already initialized")
    FAILURE             = (0x01, "TPM_RC_FAILURE", "commands not being accepted because of a TPM failure")
    SEQUENCE            = (0x03, "TPM_RC_SEQUENCE", "improper use of a sequence handle")
    PRIVATE             = (0x0B, "TPM_RC_PRIVATE", "not currently used")
    HMAC                = (0x19, "TPM_RC_HMAC", "not currently used")
    DISABLED            = (0x20, "TPM_RC_DISABLED", "the command is disabled")
    EXCLUSIVE           = (0x21, "TPM_RC_EXCLUSIVE", "command failed because audit sequence required exclusivity")
    AUTH_TYPE           = (0x24, "TPM_RC_AUTH_TYPE", "authorization handle is not correct for command")
    AUTH_MISSING        = (0x25, "TPM_RC_AUTH_MISSING", "5 command requires an authorization session for handle and it is not present")
    POLICY              = (0x26, "TPM_RC_POLICY", "policy failure in math operation or an invalid authPolicy value")
    PCR                 = (0x27, "TPM_RC_PCR", "PCR check fail")
    PCR_CHANGED         = (0x28, "TPM_RC_PCR_CHANGED", "PCR have changed since checked")
    UPGRADE             = (0x2D, "TPM_RC_UPGRADE", "TPM is in field upgrade mode unless called via TPM2_FieldUpgradeData(), then it is not in field upgrade mode")
    TOO_MANY_CONTEXTS   = (0x2E, "TPM_RC_TOO_MANY_CONTEXTS", "context ID counter is at maximum")
    AUTH_UNAVAILABLE    = (0x2F, "TPM_RC_AUTH_UNAVAILABLE", "authValue or authPolicy is not available for selected entity")
    REBOOT              = (0x30, "TPM_RC_REBOOT", "a _TPM_Init and Startup(CLEAR) is required before the TPM can resume operation")
    UNBALANCED          = (0x31, "TPM_RC_UNBALANCED", "the protection algorithms (hash and symmetric) are not reasonably balanced; the digest size of the hash must be larger than the key size of the symmetric algorithm")
    COMMAND_SIZE        = (0x42, "TPM_RC_COMMAND_SIZE", "command commandSize value is inconsistent with contents of the command buffer; either the size is not the same as the octets loaded by the hardware interface layer or the value is not large enough to hold a command header")
    COMMAND_CODE        = (0x43, "TPM_RC_COMMAND_CODE", "command code not supported")
    AUTHSIZE            = (0x44, "TPM_RC_AUTHSIZE", "the value of authorizationSize is out of range or the number of octets in the Authorization Area is greater than required")
    AUTH_CONTEXT        = (0x45, "TPM_RC_AUTH_CONTEXT", "use of an authorization session with a context command or another command that cannot have an authorization session")
    NV_RANGE            = (0x46, "TPM_RC_NV_RANGE", "NV offset+size is out of range")
    NV_SIZE             = (0x47, "TPM_RC_NV_SIZE", "Requested allocation size is larger than allowed")
    NV_LOCKED           = (0x48, "TPM_RC_NV_LOCKED", "NV access locked")
    NV_AUTHORIZATION    = (0x49, "TPM_RC_NV_AUTHORIZATION", "NV access authorization fails in command actions")
    NV_UNINITIALIZED    = (0x4A, "TPM_RC_NV_UNINITIALIZED", "an NV Index is used before being initialized or the state saved by TPM2_Shutdown(STATE) could not be restored")
    NV_SPACE            = (0x4B, "TPM_RC_NV_SPACE", "insufficient space for NV allocation")
    NV_DEFINED          = (0x4C, "TPM_RC_NV_DEFINED", "NV Index or persistent object already defined")
    BAD_CONTEXT         = (0x50, "TPM_RC_BAD_CONTEXT", "context in TPM2_ContextLoad() is not valid")
    CPHASH              = (0x51, "TPM_RC_CPHASH", "cpHash value already set or not correct for use")
    PARENT              = (0x52, "TPM_RC_PARENT", "handle for parent is not a valid parent")
    NEEDS_TEST          = (0x53, "TPM_RC_NEEDS_TEST", "some function needs testing")
    NO_RESULT           = (0x54, "TPM_RC_NO_RESULT", "returned when an internal function cannot process a request due to an unspecified problem; this code is usually related to invalid parameters that are not properly filtered by the input unmarshaling code")
    SENSITIVE           = (0x55, "TPM_RC_SENSITIVE", "the sensitive area did not unmarshal correctly after decryption")


########################################################################################################################
# Format-one error codes
########################################################################################################################

class Fmt1Code(RcEnum):
    """Format-one error codes, shared by parameter, handle and session errors."""

    ASYMMETRIC          = (0x01, "TPM_RC_ASYMMETRIC", "asymmetric algorithm not supported or not correct")
    ATTRIBUTES          = (0x02, "TPM_RC_ATTRIBUTES", "inconsistent attributes")
    HASH                = (0x03, "TPM_RC_HASH", "hash algorithm not supported or not appropriate")
    VALUE               = (0x04, "TPM_RC_VALUE", "value is out of range or is not correct for the context")
    HIERARCHY           = (0x05, "TPM_RC_HIERARCHY", "hierarchy is not enabled or is not correct for the use")
    KEY_SIZE            = (0x07, "TPM_RC_KEY_SIZE", "key size is not supported")
    MGF                 = (0x08, "TPM_RC_MGF", "mask generation function not supported")
    MODE                = (0x09, "TPM_RC_MODE", "mode of operation not supported")
    TYPE                = (0x0A, "TPM_RC_TYPE", "the type of the value is not appropriate for the use")
    HANDLE              = (0x0B, "TPM_RC_HANDLE", "the handle is not correct for the use")
    KDF                 = (0x0C, "TPM_RC_KDF", "unsupported key derivation function or function not appropriate for use")
    RANGE               = (0x0D, "TPM_RC_RANGE", "value was out of allowed range")
    AUTH_FAIL           = (0x0E, "TPM_RC_AUTH_FAIL", "the authorization HMAC check failed and DA counter incremented")
    NONCE               = (0x0F, "TPM_RC_NONCE", "invalid nonce size or nonce value mismatch")
    PP                  = (0x10, "TPM_RC_PP", "authorization requires assertion of PP")
    SCHEME              = (0x12, "TPM_RC_SCHEME", "unsupported or incompatible scheme")
    SIZE                = (0x15, "TPM_RC_SIZE", "structure is the wrong size")
    SYMMETRIC           = (0x16, "TPM_RC_SYMMETRIC", "unsupported symmetric algorithm or key size, or not appropriate for instance")
    TAG                 = (0x17, "TPM_RC_TAG", "incorrect structure tag")
    SELECTOR            = (0x18, "TPM_RC_SELECTOR", "union selector is incorrect")
    INSUFFICIENT        = (0x1A, "TPM_RC_INSUFFICIENT", "the TPM was unable to unmarshal a value because there were not enough octets in the input buffer")
    SIGNATURE           = (0x1B, "TPM_RC_SIGNATURE", "the signature is not valid")
    KEY                 = (0x1C, "TPM_RC_KEY", "key fields are not compatible with the selected use")
    POLICY_FAIL         = (0x1D, "TPM_RC_POLICY_FAIL", "a policy check failed")
    INTEGRITY           = (0x1F, "TPM_RC_INTEGRITY", "integrity check failed")
    TICKET              = (0x20, "TPM_RC_TICKET", "invalid ticket")
    RESERVED_BITS       = (0x21, "TPM_RC_RESERVED_BITS", "reserved bits not set to zero as required")
    BAD_AUTH            = (0x22, "TPM_RC_BAD_AUTH", "authorization failure without DA implications")
    EXPIRED             = (0x23, "TPM_RC_EXPIRED", "the policy has expired")
    POLICY_CC           = (0x24, "TPM_RC_POLICY_CC", "the commandCode in the policy is not the commandCode of the command or the command code in a policy command references a command that is not implemented")
    BINDING             = (0x25, "TPM_RC_BINDING", "public and sensitive portions of an object are not cryptographically bound")
    CURVE               = (0x26, "TPM_RC_CURVE", "curve not supported")
    ECC_POINT           = (0x27, "TPM_RC_ECC_POINT", "point is not on the required curve")


########################################################################################################################
# Warning codes
########################################################################################################################

class WarningCode(RcEnum):
    """Warning codes, typically transient conditions."""

    CONTEXT_GAP         = (0x01, "TPM_RC_CONTEXT_GAP", "gap for context ID is too large")
    OBJECT_MEMORY       = (0x02, "TPM_RC_OBJECT_MEMORY", "out of memory for object contexts")
    SESSION_MEMORY      = (0x03, "TPM_RC_SESSION_MEMORY", "out of memory for session contexts")
    MEMORY              = (0x04, "TPM_RC_MEMORY", "out of shared object/session memory or need space for internal operations")
    SESSION_HANDLES     = (0x05, "TPM_RC_SESSION_HANDLES", "out of session handles")
    OBJECT_HANDLES      = (0x06, "TPM_RC_OBJECT_HANDLES", "out of object handles")
    LOCALITY            = (0x07, "TPM_RC_LOCALITY", "bad locality")
    YIELDED             = (0x08, "TPM_RC_YIELDED", "the TPM has suspended operation on the command; forward progress was made and the command may be retried")
    CANCELED            = (0x09, "TPM_RC_CANCELED", "the command was canceled")
    TESTING             = (0x0A, "TPM_RC_TESTING", "TPM is performing self-tests")
    REFERENCE_H0        = (0x10, "TPM_RC_REFERENCE_H0", "the 1st handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_H1        = (0x11, "TPM_RC_REFERENCE_H1", "the 2nd handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_H2        = (0x12, "TPM_RC_REFERENCE_H2", "the 3rd handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_H3        = (0x13, "TPM_RC_REFERENCE_H3", "the 4th handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_H4        = (0x14, "TPM_RC_REFERENCE_H4", "the 5th handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_H5        = (0x15, "TPM_RC_REFERENCE_H5", "the 6th handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_H6        = (0x16, "TPM_RC_REFERENCE_H6", "the 7th handle in the handle area references a transient object or session that is not loaded")
    REFERENCE_S0        = (0x18, "TPM_RC_REFERENCE_S0", "the 1st authorization session handle references a session that is not loaded")
    REFERENCE_S1        = (0x19, "TPM_RC_REFERENCE_S1", "the 2nd authorization session handle references a session that is not loaded")
    REFERENCE_S2        = (0x1A, "TPM_RC_REFERENCE_S2", "the 3rd authorization session handle references a session that is not loaded")
    REFERENCE_S3        = (0x1B, "TPM_RC_REFERENCE_S3", "the 4th authorization session handle references a session that is not loaded")
    REFERENCE_S4        = (0x1C, "TPM_RC_REFERENCE_S4", "the 5th authorization session handle references a session that is not loaded")
    REFERENCE_S5        = (0x1D, "TPM_RC_REFERENCE_S5", "the 6th authorization session handle references a session that is not loaded")
    REFERENCE_S6        = (0x1E, "TPM_RC_REFERENCE_S6", "the 7th authorization session handle references a session that is not loaded")
    NV_RATE             = (0x20, "TPM_RC_NV_RATE", "the TPM is rate-limiting accesses to prevent wearout of NV")
    LOCKOUT             = (0x21, "TPM_RC_LOCKOUT", "authorizations for objects subject to DA protection are not allowed at this time because the TPM is in DA lockout mode")
    RETRY               = (0x22, "TPM_RC_RETRY", "the TPM was not able to start the command")
    NV_UNAVAILABLE      = (0x23, "TPM_RC_NV_UNAVAILABLE", "the command may require writing of NV and NV is not current accessible")
# fmt: on
