"""Admissions Pipeline - submit and decide applications."""

from registrar.admissions.pipeline import AdmissionsPipeline

__all__ = ["AdmissionsPipeline"]
